class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else self.__class__.__name__


class ValidationError(DomainError):
    """Raised when input data is missing, malformed or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    status_code = 401


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    status_code = 404


class ConflictError(DomainError):
    """Raised when a unique or foreign-key constraint blocks the change."""

    status_code = 409
