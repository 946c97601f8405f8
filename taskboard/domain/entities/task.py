"""Task domain entity.

Represents a unit of work record, independent of persistence.
"""

import re
from dataclasses import dataclass, replace

from taskboard.domain.enums import TaskSeverity, TaskStatus
from taskboard.domain.exceptions import ValidationException

# Ids travel as a single URL path segment: unreserved characters, no leading dot.
TASK_ID_PATTERN = r"^[A-Za-z0-9_~-][A-Za-z0-9_.~-]*$"
TASK_ID_MAX_LENGTH = 64
_TASK_ID_RE = re.compile(TASK_ID_PATTERN)

# Characters outside the XML 1.0 Char production (C0 controls other than
# tab/newline/carriage return, surrogates, U+FFFE and U+FFFF).
_NON_XML_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def _check_text(value: str, field: str) -> None:
    if _NON_XML_CHARS.search(value):
        raise ValidationException(
            f"Task {field} contains a control character that cannot be exported",
            field=field,
        )


@dataclass
class TaskEntity:
    """Domain entity for a task.

    id is assigned once at creation and never changes afterwards. status and
    severity are coerced to their enums on construction so a stored task never
    carries a free-form value. Validation runs on construction.
    """

    id: str
    title: str
    status: TaskStatus
    severity: TaskSeverity
    description: str = ""
    assigned_to: str = ""

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate task business rules. Raises ValidationException if invalid."""
        if not self.id or not self.id.strip():
            raise ValidationException("Task ID is required", field="id")
        if len(self.id) > TASK_ID_MAX_LENGTH or not _TASK_ID_RE.match(self.id):
            raise ValidationException(
                "Task ID may only contain letters, digits and '-_.~' "
                f"(max {TASK_ID_MAX_LENGTH}, no leading dot)",
                field="id",
            )
        if self.title is None:
            raise ValidationException("Task title is required", field="title")
        if self.description is None:
            self.description = ""
        if self.assigned_to is None:
            self.assigned_to = ""
        _check_text(self.title, "title")
        _check_text(self.description, "description")
        _check_text(self.assigned_to, "assignedTo")
        try:
            self.status = TaskStatus(self.status)
        except ValueError as e:
            raise ValidationException(
                f"Invalid status: {self.status!r}", field="status"
            ) from e
        try:
            self.severity = TaskSeverity(self.severity)
        except ValueError as e:
            raise ValidationException(
                f"Invalid severity: {self.severity!r}", field="severity"
            ) from e

    def copy(self) -> "TaskEntity":
        """Return an independent copy (all fields are immutable values)."""
        return replace(self)
