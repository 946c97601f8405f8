"""Task API schemas.

JSON uses camelCase (assignedTo); Python attributes use snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field

from taskboard.application.dtos.task import BulkCreateResult, TaskData, TaskPatch
from taskboard.domain.entities.task import TASK_ID_MAX_LENGTH, TASK_ID_PATTERN, TaskEntity
from taskboard.domain.enums import TaskSeverity, TaskStatus


class _TaskSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class TaskCreateRequest(_TaskSchema):
    """Request body for create and full replace (PUT).

    id is optional on create (URL-safe, see TASK_ID_PATTERN); on replace the
    path id always wins.
    """

    id: str | None = Field(
        default=None, max_length=TASK_ID_MAX_LENGTH, pattern=TASK_ID_PATTERN
    )
    title: str = Field(..., max_length=500)
    description: str = ""
    assigned_to: str = Field(default="", alias="assignedTo", max_length=255)
    status: TaskStatus
    severity: TaskSeverity

    def to_data(self) -> TaskData:
        return TaskData(
            id=self.id,
            title=self.title,
            description=self.description,
            assigned_to=self.assigned_to,
            status=self.status,
            severity=self.severity,
        )


class TaskPatchRequest(_TaskSchema):
    """Request body for PATCH. Omitted or null fields are left unchanged."""

    title: str | None = Field(default=None, max_length=500)
    description: str | None = None
    assigned_to: str | None = Field(default=None, alias="assignedTo", max_length=255)
    status: TaskStatus | None = None
    severity: TaskSeverity | None = None

    def to_patch(self) -> TaskPatch:
        return TaskPatch(
            title=self.title,
            description=self.description,
            assigned_to=self.assigned_to,
            status=self.status,
            severity=self.severity,
        )


class TaskResponse(_TaskSchema):
    """Full task representation."""

    id: str
    title: str
    description: str
    assigned_to: str = Field(alias="assignedTo")
    status: TaskStatus
    severity: TaskSeverity

    @classmethod
    def from_entity(cls, task: TaskEntity) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            assigned_to=task.assigned_to,
            status=task.status,
            severity=task.severity,
        )


class BulkCreateFailureItem(BaseModel):
    """One rejected item of a bulk create, by position in the request array."""

    index: int
    error: str
    message: str


class BulkCreateResponse(BaseModel):
    """Response for bulk create: ids stored plus items that were rejected."""

    created: list[str] = Field(default_factory=list)
    failed: list[BulkCreateFailureItem] = Field(default_factory=list)

    @classmethod
    def from_result(
        cls,
        result: BulkCreateResult,
        positions: list[int],
        rejected: list[BulkCreateFailureItem],
    ) -> "BulkCreateResponse":
        """Merge service failures (indexed into positions) with items rejected before the service ran."""
        failed = rejected + [
            BulkCreateFailureItem(
                index=positions[f.index], error=f.error_code, message=f.message
            )
            for f in result.failed
        ]
        return cls(
            created=[task.id for task in result.created],
            failed=sorted(failed, key=lambda item: item.index),
        )
