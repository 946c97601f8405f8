"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from taskboard.domain.entities import TaskEntity
from taskboard.domain.enums import TaskSeverity, TaskStatus
from taskboard.domain.exceptions import (
    InvalidFieldsException,
    InvalidSortKeyException,
    MalformedPayloadException,
    ResourceNotFoundException,
    TaskAlreadyExistsException,
    TaskboardException,
    UnsupportedFormatException,
    ValidationException,
)

__all__ = [
    # Entities
    "TaskEntity",
    # Enums
    "TaskSeverity",
    "TaskStatus",
    # Exceptions
    "InvalidFieldsException",
    "InvalidSortKeyException",
    "MalformedPayloadException",
    "ResourceNotFoundException",
    "TaskAlreadyExistsException",
    "TaskboardException",
    "UnsupportedFormatException",
    "ValidationException",
]
