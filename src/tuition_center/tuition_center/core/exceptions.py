class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an operation targets a record that does not exist."""


class ConflictError(DomainError):
    """Raised when creating a record whose unique key is already taken."""
