"""Application DTOs (no dependency on ORM or HTTP schemas)."""

from taskboard.application.dtos.task import (
    BulkCreateFailure,
    BulkCreateResult,
    TaskData,
    TaskFilters,
    TaskPatch,
)

__all__ = [
    "BulkCreateFailure",
    "BulkCreateResult",
    "TaskData",
    "TaskFilters",
    "TaskPatch",
]
