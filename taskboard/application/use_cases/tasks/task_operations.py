"""Task operations: search, CRUD, bulk create and export (delegate to ITaskRepository)."""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence, TextIO

from taskboard.application.dtos.task import (
    BulkCreateFailure,
    BulkCreateResult,
    TaskData,
    TaskFilters,
    TaskPatch,
)
from taskboard.application.interfaces.repositories import ITaskRepository
from taskboard.application.services.task_export import SERIALIZERS, ExportFormat
from taskboard.application.services.task_fields import (
    parse_field_list,
    project_task,
    task_to_dict,
)
from taskboard.application.services.task_filter import filter_tasks
from taskboard.application.services.task_sorting import resolve_sort
from taskboard.domain.entities.task import TaskEntity
from taskboard.domain.exceptions import (
    ResourceNotFoundException,
    TaskAlreadyExistsException,
    TaskboardException,
)
from taskboard.shared.utils.generators import generate_cuid

logger = logging.getLogger(__name__)

_NO_FILTERS = TaskFilters()


class TaskQueryService:
    """Search, mutate and export tasks over a single task repository.

    Filtering, sorting and serialization run in memory over find_all();
    the repository owns storage only.
    """

    def __init__(
        self,
        task_repo: ITaskRepository,
        id_factory: Callable[[], str] = generate_cuid,
    ) -> None:
        self.task_repo = task_repo
        self.id_factory = id_factory

    async def list_tasks(
        self,
        filters: TaskFilters | None = None,
        sort: str | None = None,
    ) -> list[TaskEntity]:
        """Return tasks matching filters, in store order or sorted by the sort token.

        The sort token is resolved before the store is read so a bad token
        fails without touching persistence.
        """
        ordering = resolve_sort(sort) if sort and sort.strip() else None
        tasks = filter_tasks(await self.task_repo.find_all(), filters or _NO_FILTERS)
        return ordering.apply(tasks) if ordering else tasks

    async def list_projected(
        self,
        filters: TaskFilters | None = None,
        sort: str | None = None,
        fields: str | None = None,
    ) -> list[dict[str, Any]]:
        """Return matching tasks as dicts, reduced to fields when given."""
        names = parse_field_list(fields) if fields else []
        tasks = await self.list_tasks(filters, sort)
        if not names:
            return [task_to_dict(task) for task in tasks]
        return [project_task(task, names) for task in tasks]

    async def get_task(self, task_id: str) -> TaskEntity:
        """Return task by id; else raise ResourceNotFoundException."""
        task = await self.task_repo.find_by_id(task_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        return task

    async def get_projected(self, task_id: str, fields: str | None = None) -> dict[str, Any]:
        """Return one task as a dict, reduced to fields when given."""
        names = parse_field_list(fields) if fields else []
        task = await self.get_task(task_id)
        return project_task(task, names) if names else task_to_dict(task)

    async def exists(self, task_id: str) -> bool:
        return await self.task_repo.find_by_id(task_id) is not None

    async def create_task(self, data: TaskData) -> TaskEntity:
        """Create a task. The server assigns an id unless data carries an unused one.

        Raises:
            TaskAlreadyExistsException: If data.id is already taken.
        """
        if data.id:
            if await self.task_repo.find_by_id(data.id) is not None:
                raise TaskAlreadyExistsException(data.id)
            task_id = data.id
        else:
            task_id = self.id_factory()
        task = data.to_entity(task_id)
        await self.task_repo.save(task)
        logger.info("Created task %s", task.id)
        return task

    async def create_many(self, items: Sequence[TaskData]) -> BulkCreateResult:
        """Create each item independently; a failing item does not stop the rest.

        Nothing is rolled back. Failures are reported by position in items.
        """
        result = BulkCreateResult()
        for index, data in enumerate(items):
            try:
                result.created.append(await self.create_task(data))
            except TaskboardException as e:
                logger.warning("Bulk create item %d failed: %s", index, e.message)
                result.failed.append(
                    BulkCreateFailure(index=index, error_code=e.error_code, message=e.message)
                )
        logger.info(
            "Bulk create finished: %d created, %d failed",
            len(result.created),
            len(result.failed),
        )
        return result

    async def replace_task(self, task_id: str, data: TaskData) -> TaskEntity:
        """Replace every field of an existing task; the id stays task_id."""
        await self.get_task(task_id)
        task = data.to_entity(task_id)
        await self.task_repo.save(task)
        logger.info("Replaced task %s", task_id)
        return task

    async def patch_task(self, task_id: str, patch: TaskPatch) -> TaskEntity:
        """Apply the non-null fields of patch to an existing task."""
        existing = await self.get_task(task_id)
        task = patch.merge_into(existing)
        await self.task_repo.save(task)
        logger.info("Patched task %s (%s)", task_id, ", ".join(patch.changes()) or "no changes")
        return task

    async def delete_task(self, task_id: str) -> None:
        """Delete task by id; else raise ResourceNotFoundException."""
        if not await self.task_repo.delete_by_id(task_id):
            raise ResourceNotFoundException("task", task_id)
        logger.info("Deleted task %s", task_id)

    async def export_tasks(
        self,
        export_format: str,
        sink: TextIO,
        filters: TaskFilters | None = None,
        sort: str | None = None,
    ) -> ExportFormat:
        """Write the matching tasks to sink in export_format and return the resolved format.

        Raises:
            UnsupportedFormatException: If export_format is not csv or xml.
        """
        fmt = ExportFormat.parse(export_format)
        tasks = await self.list_tasks(filters, sort)
        SERIALIZERS[fmt](tasks, sink)
        logger.info("Exported %d tasks as %s", len(tasks), fmt.value)
        return fmt
