"""Error handling module with a uniform JSON error envelope."""

from compass.core.errors.exceptions import (
    AppException,
    NotFoundError,
    UnauthorizedError,
    UpstreamError,
    ValidationError,
)
from compass.core.errors.handlers import (
    ErrorResponse,
    FieldError,
    register_exception_handlers,
)


__all__ = [
    # Exceptions
    "AppException",
    # Handlers
    "ErrorResponse",
    "FieldError",
    "NotFoundError",
    "UnauthorizedError",
    "UpstreamError",
    "ValidationError",
    "register_exception_handlers",
]
