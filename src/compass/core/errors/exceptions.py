"""Domain exceptions for the application.

These exceptions represent business-logic errors and are converted
to the JSON error envelope by the exception handlers.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    All domain exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for clients
        status_code: HTTP status code for the response
        details: Additional error details
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Raised when a requested resource is not found.

    A resource that exists under another tenant is reported the same way.

    Example:
        raise NotFoundError("Card not found", resource="card", resource_id="42")
    """

    message = "Resource not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message=message, details=details, **kwargs)


class ValidationError(AppException):
    """Raised when request data fails validation.

    Example:
        raise ValidationError(
            "Invalid file type",
            errors=[{"field": "file", "message": "image/bmp is not allowed"}]
        )
    """

    message = "Validation error"
    error_code = "validation_error"
    status_code = 400

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if errors:
            details["errors"] = errors
        super().__init__(message=message, details=details, **kwargs)


class UnauthorizedError(AppException):
    """Raised when the caller is not authenticated or lacks admin capability.

    Example:
        raise UnauthorizedError("Admin access required", error_code="not_admin")
    """

    message = "Authentication required"
    error_code = "unauthorized"
    status_code = 401


class UpstreamError(AppException):
    """Raised when the database or an external collaborator fails.

    Example:
        raise UpstreamError("Blob storage rejected the upload")
    """

    message = "Upstream service failed"
    error_code = "upstream_error"
    status_code = 500
