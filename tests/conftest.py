"""Pytest configuration and fixtures for taskboard.

Uses taskboard.main:app for HTTP tests (memory backend unless DATABASE_BACKEND
says otherwise) and taskboard.infrastructure.persistence.database for
DB-dependent fixtures.
"""

import os

# API tests share one client address; write limits would trip across tests.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.application.use_cases.tasks import TaskQueryService
from taskboard.domain.entities.task import TaskEntity
from taskboard.domain.enums import TaskSeverity, TaskStatus
from taskboard.infrastructure.persistence import database
from taskboard.infrastructure.persistence.repositories import (
    InMemoryTaskRepository,
    get_memory_task_repository,
)
from taskboard.main import app


@pytest.fixture(autouse=True)
def _empty_memory_store() -> None:
    """Every test starts with an empty process-wide store (ASGITransport skips lifespan)."""
    get_memory_task_repository().clear()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def sample_tasks() -> list[TaskEntity]:
    """Four tasks with distinct titles; two share severity HIGH (for stability checks)."""
    return [
        TaskEntity(
            id="t1",
            title="Fix login",
            description="Users cannot log in",
            assigned_to="alice",
            status=TaskStatus.OPEN,
            severity=TaskSeverity.HIGH,
        ),
        TaskEntity(
            id="t2",
            title="Write docs",
            description="API reference",
            assigned_to="bob",
            status=TaskStatus.IN_PROGRESS,
            severity=TaskSeverity.LOW,
        ),
        TaskEntity(
            id="t3",
            title="Audit logs",
            description="Check retention",
            assigned_to="Alice",
            status=TaskStatus.DONE,
            severity=TaskSeverity.HIGH,
        ),
        TaskEntity(
            id="t4",
            title="fix build",
            description="",
            assigned_to="",
            status=TaskStatus.OPEN,
            severity=TaskSeverity.CRITICAL,
        ),
    ]


@pytest.fixture
def memory_repo() -> InMemoryTaskRepository:
    """Fresh, private in-memory store (not the app-wide one)."""
    return InMemoryTaskRepository()


@pytest.fixture
def task_service(memory_repo: InMemoryTaskRepository) -> TaskQueryService:
    """TaskQueryService over memory_repo with predictable ids (task-1, task-2, ...)."""
    counter = iter(range(1, 10_000))
    return TaskQueryService(memory_repo, id_factory=lambda: f"task-{next(counter)}")


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_BACKEND=postgres and DATABASE_URL. Skips (pytest.skip)
    when Postgres is not configured. Use @pytest.mark.requires_db to mark
    tests that need this fixture; run without DB via: pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_BACKEND=postgres and DATABASE_URL"
        )
    await database.init_models()
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
    # The engine is bound to this test's event loop.
    await database.dispose_engine()
