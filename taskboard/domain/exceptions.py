"""Domain exceptions for the Taskboard application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class TaskboardException(Exception):
    """Base exception for all Taskboard application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

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

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TaskboardException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(TaskboardException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'task').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class TaskAlreadyExistsException(TaskboardException):
    """Raised when creating a task with a client-supplied id that is already taken."""

    def __init__(self, task_id: str) -> None:
        super().__init__(
            f"Task with id '{task_id}' already exists",
            "TASK_ALREADY_EXISTS",
            {"task_id": task_id},
        )


class InvalidSortKeyException(TaskboardException):
    """Raised when a sort token names a field that cannot be sorted on."""

    def __init__(self, sort_key: str, allowed: list[str]) -> None:
        """Initialize with the rejected token and the sortable field names.

        Args:
            sort_key: The raw sort token from the request.
            allowed: Field names that are accepted.
        """
        super().__init__(
            f"Cannot sort by '{sort_key}'",
            "INVALID_SORT_KEY",
            {"sort_key": sort_key, "allowed": allowed},
        )


class InvalidFieldsException(TaskboardException):
    """Raised when a sparse field list names unknown fields."""

    def __init__(self, unknown: list[str], allowed: list[str]) -> None:
        super().__init__(
            f"Unknown fields: {', '.join(unknown)}",
            "INVALID_FIELDS",
            {"unknown": unknown, "allowed": allowed},
        )


class UnsupportedFormatException(TaskboardException):
    """Raised when an export is requested in a format other than csv or xml."""

    def __init__(self, export_format: str, supported: list[str]) -> None:
        super().__init__(
            f"Unsupported export format: {export_format}",
            "UNSUPPORTED_FORMAT",
            {"format": export_format, "supported": supported},
        )


class MalformedPayloadException(TaskboardException):
    """Raised when a request body cannot be parsed into a task record.

    errors carries the parser's per-field complaints when there are any.
    """

    def __init__(
        self, message: str = "Malformed task payload", errors: list[Any] | None = None
    ) -> None:
        details = {"errors": errors} if errors else {}
        super().__init__(message, "MALFORMED_PAYLOAD", details)


class SqlNotConfiguredException(TaskboardException):
    """Raised when an operation requires Postgres but the backend is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
