"""Task use cases."""

from taskboard.application.use_cases.tasks.task_operations import TaskQueryService

__all__ = [
    "TaskQueryService",
]
