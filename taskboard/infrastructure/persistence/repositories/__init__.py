"""Persistence repositories. Re-exports for dependency injection."""

from taskboard.infrastructure.persistence.repositories.memory_task_repo import (
    InMemoryTaskRepository,
    get_memory_task_repository,
)
from taskboard.infrastructure.persistence.repositories.task_repo import TaskRepository

__all__ = [
    "InMemoryTaskRepository",
    "TaskRepository",
    "get_memory_task_repository",
]
