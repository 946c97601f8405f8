"""Application use cases: one entry point per workflow."""

from taskboard.application.use_cases.tasks import TaskQueryService

__all__ = [
    "TaskQueryService",
]
