"""Task repository integration tests. Require Postgres; session is rolled back after each test."""

import pytest

from taskboard.domain.entities.task import TaskEntity
from taskboard.domain.enums import TaskSeverity, TaskStatus
from taskboard.infrastructure.persistence.repositories.task_repo import TaskRepository


def _task(task_id: str, title: str = "Repo task") -> TaskEntity:
    return TaskEntity(
        id=task_id,
        title=title,
        description="stored in postgres",
        assigned_to="alice",
        status=TaskStatus.OPEN,
        severity=TaskSeverity.MEDIUM,
    )


@pytest.mark.requires_db
async def test_save_and_find_by_id(db_session) -> None:
    """Save a task then load it by id."""
    repo = TaskRepository(db_session)
    await repo.save(_task("repo-test-1"))
    found = await repo.find_by_id("repo-test-1")
    assert found == _task("repo-test-1")


@pytest.mark.requires_db
async def test_find_by_id_not_found_returns_none(db_session) -> None:
    repo = TaskRepository(db_session)
    assert await repo.find_by_id("repo-missing-xyz") is None


@pytest.mark.requires_db
async def test_save_existing_updates_in_place(db_session) -> None:
    """Saving an existing id overwrites fields and keeps insertion position."""
    repo = TaskRepository(db_session)
    await repo.save(_task("repo-order-a", "first"))
    await repo.save(_task("repo-order-b", "second"))
    await repo.save(_task("repo-order-a", "first, renamed"))
    ids = [t.id for t in await repo.find_all() if t.id.startswith("repo-order-")]
    assert ids == ["repo-order-a", "repo-order-b"]
    assert (await repo.find_by_id("repo-order-a")).title == "first, renamed"


@pytest.mark.requires_db
async def test_delete_by_id(db_session) -> None:
    repo = TaskRepository(db_session)
    await repo.save(_task("repo-delete"))
    assert await repo.delete_by_id("repo-delete") is True
    assert await repo.find_by_id("repo-delete") is None
    assert await repo.delete_by_id("repo-delete") is False
