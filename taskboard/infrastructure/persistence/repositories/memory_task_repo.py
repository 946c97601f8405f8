"""In-memory task repository (memory backend and tests).

Tasks live in an insertion-ordered dict keyed by id. Entities are copied on
the way in and out so callers never share state with the store.
"""

from __future__ import annotations

from functools import lru_cache

from taskboard.domain.entities.task import TaskEntity


class InMemoryTaskRepository:
    """Process-local task store. Implements ITaskRepository."""

    def __init__(self, tasks: list[TaskEntity] | None = None) -> None:
        self._tasks: dict[str, TaskEntity] = {}
        for task in tasks or []:
            self._tasks[task.id] = task.copy()

    def __len__(self) -> int:
        return len(self._tasks)

    async def find_all(self) -> list[TaskEntity]:
        return [task.copy() for task in self._tasks.values()]

    async def find_by_id(self, task_id: str) -> TaskEntity | None:
        task = self._tasks.get(task_id)
        return task.copy() if task is not None else None

    async def save(self, task: TaskEntity) -> None:
        """Insert or overwrite. Overwriting keeps the task's original position."""
        self._tasks[task.id] = task.copy()

    async def delete_by_id(self, task_id: str) -> bool:
        return self._tasks.pop(task_id, None) is not None

    def clear(self) -> None:
        self._tasks.clear()


@lru_cache
def get_memory_task_repository() -> InMemoryTaskRepository:
    """Return the process-wide store used by the memory backend.

    In tests, call get_memory_task_repository.cache_clear() (or .clear() on
    the instance) to start from an empty store.
    """
    return InMemoryTaskRepository()
