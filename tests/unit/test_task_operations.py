"""Unit tests for TaskQueryService over the in-memory repository."""

import io

import pytest

from taskboard.application.dtos.task import TaskData, TaskFilters, TaskPatch
from taskboard.application.services.task_export import ExportFormat
from taskboard.domain.enums import TaskSeverity, TaskStatus
from taskboard.domain.exceptions import (
    InvalidFieldsException,
    InvalidSortKeyException,
    ResourceNotFoundException,
    TaskAlreadyExistsException,
    UnsupportedFormatException,
)


def _data(title: str = "Fix login", **overrides) -> TaskData:
    values = {
        "title": title,
        "description": "Users cannot log in",
        "assigned_to": "alice",
        "status": TaskStatus.OPEN,
        "severity": TaskSeverity.HIGH,
    }
    values.update(overrides)
    return TaskData(**values)


async def test_create_then_get_returns_equal_record(task_service) -> None:
    created = await task_service.create_task(_data())
    assert created.id == "task-1"
    fetched = await task_service.get_task(created.id)
    assert fetched == created
    assert fetched.title == "Fix login"
    assert fetched.status == TaskStatus.OPEN


async def test_create_honors_unused_client_id(task_service) -> None:
    created = await task_service.create_task(_data(id="mine"))
    assert created.id == "mine"


async def test_create_with_taken_id_raises(task_service) -> None:
    await task_service.create_task(_data(id="dup"))
    with pytest.raises(TaskAlreadyExistsException):
        await task_service.create_task(_data(title="Other", id="dup"))
    assert (await task_service.get_task("dup")).title == "Fix login"


async def test_get_missing_raises(task_service) -> None:
    with pytest.raises(ResourceNotFoundException) as exc_info:
        await task_service.get_task("nope")
    assert exc_info.value.details == {"resource_type": "task", "resource_id": "nope"}


async def test_patch_changes_only_supplied_fields(task_service) -> None:
    created = await task_service.create_task(_data())
    patched = await task_service.patch_task(
        created.id, TaskPatch(status=TaskStatus.DONE, description="")
    )
    assert patched.status == TaskStatus.DONE
    assert patched.description == ""
    assert patched.title == created.title
    assert patched.severity == created.severity
    assert await task_service.get_task(created.id) == patched


async def test_patch_missing_raises_and_stores_nothing(task_service, memory_repo) -> None:
    with pytest.raises(ResourceNotFoundException):
        await task_service.patch_task("ghost", TaskPatch(title="x"))
    assert len(memory_repo) == 0


async def test_replace_keeps_path_id(task_service) -> None:
    created = await task_service.create_task(_data())
    replaced = await task_service.replace_task(
        created.id, _data(title="Rewritten", id="ignored", severity=TaskSeverity.LOW)
    )
    assert replaced.id == created.id
    assert (await task_service.get_task(created.id)).title == "Rewritten"
    assert not await task_service.exists("ignored")


async def test_replace_missing_raises(task_service) -> None:
    with pytest.raises(ResourceNotFoundException):
        await task_service.replace_task("ghost", _data())


async def test_delete_then_missing(task_service) -> None:
    created = await task_service.create_task(_data())
    await task_service.delete_task(created.id)
    assert not await task_service.exists(created.id)
    with pytest.raises(ResourceNotFoundException):
        await task_service.delete_task(created.id)


async def test_store_returns_copies(task_service) -> None:
    created = await task_service.create_task(_data())
    fetched = await task_service.get_task(created.id)
    fetched.title = "mutated"
    assert (await task_service.get_task(created.id)).title == "Fix login"


async def test_list_tasks_filters_and_sorts(task_service) -> None:
    await task_service.create_task(_data("Beta"))
    await task_service.create_task(_data("alpha", status=TaskStatus.DONE))
    await task_service.create_task(_data("Gamma"))
    got = await task_service.list_tasks(TaskFilters(status=TaskStatus.OPEN), sort="-title")
    assert [t.title for t in got] == ["Gamma", "Beta"]


async def test_list_tasks_invalid_sort_raises(task_service) -> None:
    await task_service.create_task(_data())
    with pytest.raises(InvalidSortKeyException):
        await task_service.list_tasks(sort="priority")


async def test_list_projected(task_service) -> None:
    await task_service.create_task(_data())
    assert await task_service.list_projected(fields="title,status") == [
        {"title": "Fix login", "status": "OPEN"}
    ]
    with pytest.raises(InvalidFieldsException):
        await task_service.list_projected(fields="owner")


async def test_get_projected(task_service) -> None:
    created = await task_service.create_task(_data())
    assert await task_service.get_projected(created.id, "id") == {"id": created.id}
    full = await task_service.get_projected(created.id)
    assert full["assignedTo"] == "alice"


async def test_export_empty_store_as_csv_is_empty(task_service) -> None:
    buffer = io.StringIO()
    fmt = await task_service.export_tasks("csv", buffer)
    assert fmt is ExportFormat.CSV
    assert buffer.getvalue() == ""


async def test_export_unknown_format_raises(task_service) -> None:
    await task_service.create_task(_data())
    buffer = io.StringIO()
    with pytest.raises(UnsupportedFormatException):
        await task_service.export_tasks("pdf", buffer)
    assert buffer.getvalue() == ""


async def test_export_applies_filters(task_service) -> None:
    await task_service.create_task(_data("Keep"))
    await task_service.create_task(_data("Drop", severity=TaskSeverity.LOW))
    buffer = io.StringIO()
    await task_service.export_tasks(
        "xml", buffer, filters=TaskFilters(severity=TaskSeverity.HIGH)
    )
    assert "<title>Keep</title>" in buffer.getvalue()
    assert "Drop" not in buffer.getvalue()


async def test_create_many_reports_failures_and_keeps_going(task_service) -> None:
    await task_service.create_task(_data(id="taken"))
    result = await task_service.create_many(
        [_data("one"), _data("two", id="taken"), _data("three")]
    )
    assert [t.title for t in result.created] == ["one", "three"]
    assert len(result.failed) == 1
    assert result.failed[0].index == 1
    assert result.failed[0].error_code == "TASK_ALREADY_EXISTS"
    assert len(await task_service.list_tasks()) == 3


async def test_export_with_no_matching_tasks_is_empty(task_service) -> None:
    await task_service.create_task(_data(status=TaskStatus.DONE))
    buffer = io.StringIO()
    await task_service.export_tasks(
        "csv", buffer, filters=TaskFilters(status=TaskStatus.OPEN)
    )
    assert buffer.getvalue() == ""


async def test_patch_status_leaves_other_fields(task_service) -> None:
    created = await task_service.create_task(
        _data("Fix bug", description="NPE on save")
    )
    await task_service.patch_task(created.id, TaskPatch(status=TaskStatus.DONE))
    fetched = await task_service.get_task(created.id)
    assert fetched.status == TaskStatus.DONE
    assert (fetched.title, fetched.description, fetched.assigned_to, fetched.severity) == (
        "Fix bug",
        "NPE on save",
        "alice",
        TaskSeverity.HIGH,
    )
