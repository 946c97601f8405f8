"""DTOs for task use cases (no dependency on ORM or HTTP schemas)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from taskboard.domain.entities.task import TaskEntity
from taskboard.domain.enums import TaskSeverity, TaskStatus


@dataclass(frozen=True)
class TaskData:
    """Full task payload for create and replace. id is None when the server should assign one."""

    title: str
    status: TaskStatus
    severity: TaskSeverity
    description: str = ""
    assigned_to: str = ""
    id: str | None = None

    def to_entity(self, task_id: str) -> TaskEntity:
        """Build the entity stored under task_id (any id carried here is ignored)."""
        return TaskEntity(
            id=task_id,
            title=self.title,
            description=self.description,
            assigned_to=self.assigned_to,
            status=self.status,
            severity=self.severity,
        )


@dataclass(frozen=True)
class TaskPatch:
    """Partial update: None means "leave unchanged"."""

    title: str | None = None
    description: str | None = None
    assigned_to: str | None = None
    status: TaskStatus | None = None
    severity: TaskSeverity | None = None

    def changes(self) -> dict[str, object]:
        """Return only the fields that were supplied."""
        candidates = {
            "title": self.title,
            "description": self.description,
            "assigned_to": self.assigned_to,
            "status": self.status,
            "severity": self.severity,
        }
        return {name: value for name, value in candidates.items() if value is not None}

    def merge_into(self, task: TaskEntity) -> TaskEntity:
        """Return a new entity with the supplied fields applied; task is not modified."""
        return replace(task, **self.changes())


@dataclass(frozen=True)
class TaskFilters:
    """Optional search predicates. A field left as None places no constraint."""

    title: str | None = None
    description: str | None = None
    assigned_to: str | None = None
    status: TaskStatus | None = None
    severity: TaskSeverity | None = None


@dataclass(frozen=True)
class BulkCreateFailure:
    """One item of a bulk create that could not be stored."""

    index: int
    error_code: str
    message: str


@dataclass
class BulkCreateResult:
    """Outcome of create_many: stored tasks plus per-item failures, in input order."""

    created: list[TaskEntity] = field(default_factory=list)
    failed: list[BulkCreateFailure] = field(default_factory=list)
