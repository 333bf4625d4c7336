from typing import Any, Mapping, Optional


class AppError(Exception):
    """Base class for errors that map onto an HTTP response.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    error_code = "INTERNAL_ERROR"
    default_message = "Internal error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def __str__(self) -> str:
        return self.message


class NotFoundError(AppError):
    """Raised when a requested resource was not found."""

    http_status = 404
    error_code = "NOT_FOUND"
    default_message = "Not found"


class UnauthorizedError(AppError):
    """Raised when the request carries no usable session cookie."""

    http_status = 401
    error_code = "UNAUTHORIZED"
    default_message = "Unauthorized"
