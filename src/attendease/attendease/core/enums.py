from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role carried by the session object returned at login."""

    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"


class AttendanceStatus(str, Enum):
    """Status of one student for one subject on one day.

    A missing row means "not recorded"; there is no fourth stored value.
    """

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"

    @property
    def attended(self) -> bool:
        return self in (AttendanceStatus.PRESENT, AttendanceStatus.LATE)
