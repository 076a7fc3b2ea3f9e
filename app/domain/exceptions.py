"""Domain exceptions for the Vantage application.

Defines domain-level exceptions that represent lookup and request-shape
failures. These exceptions are independent of infrastructure concerns.
Presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class VantageException(Exception):
    """Base exception for all Vantage application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. resource_id, method).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error envelope for this exception."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(VantageException):
    """Raised when input validation fails (e.g. malformed seed data)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(VantageException):
    """Raised when a requested resource (library item, browse path) is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'collection', 'path').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class MethodNotAllowedException(VantageException):
    """Raised when a request uses a verb other than GET or HEAD on a read-only view."""

    def __init__(self, method: str, allowed: tuple[str, ...] = ("GET", "HEAD")) -> None:
        """Initialize with the rejected method.

        Args:
            method: HTTP method that was used.
            allowed: Methods accepted by the view.
        """
        super().__init__(
            f"Method not allowed: {method}",
            "METHOD_NOT_ALLOWED",
            {"method": method, "allowed": list(allowed)},
        )


class RequestTimeoutException(VantageException):
    """Raised when a request exceeds the configured handling time."""

    def __init__(self, timeout_seconds: float) -> None:
        super().__init__(
            f"Request timed out after {timeout_seconds} seconds",
            "GATEWAY_TIMEOUT",
            {"timeout_seconds": timeout_seconds},
        )
