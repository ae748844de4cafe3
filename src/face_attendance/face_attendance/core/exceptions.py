class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class ConflictError(DomainError):
    """Raised when creating something that already exists."""


class NotFoundError(DomainError):
    """Raised when a student, sheet, column or file does not exist."""
