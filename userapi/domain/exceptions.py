"""Domain exceptions for the user API.

Defines domain-level exceptions that represent business rule violations
and store failures. These exceptions are independent of the HTTP layer;
the presentation layer maps them to responses in exception handlers.
"""

from typing import Any


class UserApiException(Exception):
    """Base exception for all application errors.

    All custom exceptions inherit from this class so that handlers can map
    them consistently. ``message`` is always safe to show to API clients.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
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


class ValidationException(UserApiException):
    """Raised when input validation fails (malformed or out-of-range values)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        errors: list[str] | None = None,
    ) -> None:
        """Initialize with message, optional field name and error list.

        Args:
            message: Description of the validation failure.
            field: Optional field that failed validation.
            errors: Optional ordered list of individual validation messages.
        """
        details: dict[str, Any] = {}
        if field:
            details["field"] = field
        if errors:
            details["errors"] = list(errors)
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(UserApiException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: Any) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'User').
            resource_id: The id (or lookup key) that was not found.
        """
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ConflictException(UserApiException):
    """Raised when a write collides with an existing record (unique constraint)."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "CONFLICT", details)


class DuplicateEmailException(ConflictException):
    """Raised when creating or updating a user to an email that is already registered."""

    def __init__(self) -> None:
        """Initialize with a generic message; the email itself is not echoed back."""
        super().__init__("Email already exists")
        self.error_code = "DUPLICATE_EMAIL"


class StoreException(UserApiException):
    """Raised when the store fails for any reason other than not-found or conflict.

    The message is generic ("Failed to create user"); the driver error is
    chained as ``__cause__`` and logged, never put in the message.
    """

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message, "INTERNAL_ERROR")
