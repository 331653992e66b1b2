"""Error taxonomy raised by the service layer.

Every error carries the HTTP status it maps to and a human-readable message;
the API layer renders them as ``{"message": ...}`` bodies.
"""

from __future__ import annotations


class ServiceError(RuntimeError):
    """Base exception for failures a client can act on."""

    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequestError(ServiceError):
    """Raised when required fields are missing or invalid."""

    status_code = 400
    default_message = "Missing required fields"


class UnauthorizedError(ServiceError):
    """Raised when credentials do not match."""

    status_code = 401
    default_message = "Invalid credentials"


class ForbiddenError(ServiceError):
    """Raised when the actor may not perform this specific mutation."""

    status_code = 403
    default_message = "Not authorized"


class NotFoundError(ServiceError):
    """Raised when an id reference does not resolve."""

    status_code = 404
    default_message = "Not found"


class ConflictError(ServiceError):
    """Raised when a unique field is already taken."""

    status_code = 409
    default_message = "Conflict"


def require(*values: object, message: str | None = None) -> None:
    """Raise `BadRequestError` unless every value is present and non-blank."""
    for value in values:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise BadRequestError(message)
