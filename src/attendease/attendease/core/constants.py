"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_DB_POOL_SIZE = 5
DEFAULT_RECENT_DAYS = 5
MIN_PASSWORD_LENGTH = 6

GENERIC_ERROR_MESSAGE = "An error occurred. Please try again."
NO_DATA_MESSAGE = "No students or subjects found for this course."
