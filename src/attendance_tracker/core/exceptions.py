class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "error"
    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "validation_error"


class ConflictError(DomainError):
    """Raised when a unique value (e.g. an email) is already taken."""

    code = "conflict"


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    code = "invalid_credentials"


class AuthorizationError(DomainError):
    """Raised when a bearer token is missing, invalid or expired."""

    code = "unauthorized"
    status_code = 401


class NotFoundError(DomainError):
    """Raised when a subject does not exist or belongs to another user."""

    code = "not_found"
    status_code = 404


class StorageError(DomainError):
    """Raised when the database driver fails."""

    code = "storage_error"
    status_code = 500
