"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from taskboard.domain.entities.task import TaskEntity


class ITaskRepository(Protocol):
    """Protocol for task repository (DIP). Keyed by task id."""

    async def find_all(self) -> list[TaskEntity]:
        """Return every task in insertion order."""

    async def find_by_id(self, task_id: str) -> TaskEntity | None:
        """Return task by ID, or None."""

    async def save(self, task: TaskEntity) -> None:
        """Insert the task, or overwrite the stored task with the same id."""

    async def delete_by_id(self, task_id: str) -> bool:
        """Remove the task; return True if a record existed and was removed."""
