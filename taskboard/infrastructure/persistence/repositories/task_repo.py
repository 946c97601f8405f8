"""SQLAlchemy task repository (postgres backend)."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.domain.entities.task import TaskEntity
from taskboard.domain.enums import TaskSeverity, TaskStatus
from taskboard.infrastructure.persistence.models.task import Task


def _to_entity(t: Task) -> TaskEntity:
    """Map Task ORM to TaskEntity."""
    return TaskEntity(
        id=t.id,
        title=t.title,
        description=t.description,
        assigned_to=t.assigned_to,
        status=TaskStatus(t.status),
        severity=TaskSeverity(t.severity),
    )


def _copy_fields(task: TaskEntity, row: Task) -> None:
    row.title = task.title
    row.description = task.description
    row.assigned_to = task.assigned_to
    row.status = task.status.value
    row.severity = task.severity.value


class TaskRepository:
    """Task repository. Implements ITaskRepository over one AsyncSession.

    The session's transaction is owned by the caller (transactional_session).
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find_all(self) -> list[TaskEntity]:
        result = await self.db.execute(select(Task).order_by(Task.seq))
        return [_to_entity(t) for t in result.scalars().all()]

    async def find_by_id(self, task_id: str) -> TaskEntity | None:
        row = await self.db.get(Task, task_id)
        return _to_entity(row) if row is not None else None

    async def save(self, task: TaskEntity) -> None:
        """Insert or update by id."""
        row = await self.db.get(Task, task.id)
        if row is None:
            row = Task(id=task.id)
            self.db.add(row)
        _copy_fields(task, row)
        await self.db.flush()

    async def delete_by_id(self, task_id: str) -> bool:
        result = await self.db.execute(delete(Task).where(Task.id == task_id))
        return (result.rowcount or 0) > 0
