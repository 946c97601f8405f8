"""Domain enumerations for the Taskboard application.

Enums represent fixed sets of domain values (task status and severity).
Declaration order is meaningful: sorting by an enum field follows it.
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Task workflow status."""

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [status.value for status in cls]


class TaskSeverity(str, Enum):
    """Task severity, from least to most urgent."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid severity values as strings."""
        return [severity.value for severity in cls]
