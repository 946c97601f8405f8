"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the task repository, the task query service
and the shared search filters. Routes depend only on these, not on
infrastructure directly.

When database_backend is 'postgres', the repository wraps a per-request
SQLAlchemy session (one transaction per request). When it is 'memory',
every request shares the process-wide in-memory store.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Query

from taskboard.application.dtos.task import TaskFilters
from taskboard.application.interfaces.repositories import ITaskRepository
from taskboard.application.use_cases.tasks import TaskQueryService
from taskboard.core.config import get_settings
from taskboard.domain.enums import TaskSeverity, TaskStatus
from taskboard.infrastructure.persistence.database import transactional_session
from taskboard.infrastructure.persistence.repositories import (
    TaskRepository,
    get_memory_task_repository,
)


async def get_task_repo() -> AsyncIterator[ITaskRepository]:
    """Yield the task repository for the configured backend."""
    if get_settings().database_backend == "postgres":
        async with transactional_session() as session:
            yield TaskRepository(session)
    else:
        yield get_memory_task_repository()


async def get_task_service(
    repo: Annotated[ITaskRepository, Depends(get_task_repo)],
) -> TaskQueryService:
    """Build TaskQueryService over the request's repository."""
    return TaskQueryService(repo)


def get_task_filters(
    title: Annotated[str | None, Query(description="Case-insensitive title prefix")] = None,
    description: Annotated[
        str | None, Query(description="Case-insensitive description prefix")
    ] = None,
    assigned_to: Annotated[
        str | None,
        Query(alias="assignedTo", description="Case-insensitive assignee prefix"),
    ] = None,
    status: Annotated[TaskStatus | None, Query()] = None,
    severity: Annotated[TaskSeverity | None, Query()] = None,
) -> TaskFilters:
    """Collect the optional search predicates shared by search and export."""
    return TaskFilters(
        title=title,
        description=description,
        assigned_to=assigned_to,
        status=status,
        severity=severity,
    )
