from .enums import ErrorKind


class DomainError(Exception):
    """Base exception for business rule violations."""

    kind = ErrorKind.VALIDATION


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    kind = ErrorKind.INVALID_CREDENTIALS


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    kind = ErrorKind.UNAUTHORIZED


class NotFoundError(DomainError):
    """Raised when a referenced user (or command) does not exist."""

    kind = ErrorKind.NOT_FOUND


class DuplicateUsernameError(DomainError):
    """Raised by the store when a username uniqueness constraint fires."""

    kind = ErrorKind.DUPLICATE


class InfrastructureError(Exception):
    """Storage or hashing failure. Never turned into a normal response."""

    kind = ErrorKind.INFRASTRUCTURE


class StorageError(InfrastructureError):
    """Raised when the database driver fails (other than a unique conflict)."""


class HashingError(InfrastructureError):
    """Raised when the password hash function cannot hash or verify."""
