"""Application error hierarchy. Every error maps to an HTTP status and a message."""


class AppError(Exception):
    """Base error rendered as ``{"error": message}`` with ``status_code``."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = 400
    default_message = "Invalid request"


class SelfModificationError(AppError):
    """An admin tried to demote or delete their own account."""

    status_code = 400
    default_message = "You cannot change your own account this way"


class Unauthorized(AppError):
    status_code = 401
    default_message = "Not authorized"


class InvalidCredentialsError(Unauthorized):
    default_message = "Incorrect username or password"


class Forbidden(AppError):
    status_code = 403
    default_message = "Access denied"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class ConflictError(AppError):
    status_code = 409
    default_message = "Resource already exists"


class DuplicateUserError(ConflictError):
    default_message = "User with this username or email already exists"


class StorageError(AppError):
    """Unexpected store failure. Callers must not assume any retry."""

    status_code = 500
    default_message = "Storage error"


class ConstraintViolation(StorageError):
    """A unique, not-null or foreign key constraint rejected a statement."""


class RouteConflictError(Exception):
    """Two routes registered for the same verb can match the same path."""
