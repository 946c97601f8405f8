"""Sort resolver: turn an X-Sort token into an ordering over tasks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from taskboard.application.services.task_fields import FIELD_NAMES, TASK_FIELDS, TaskField
from taskboard.domain.entities.task import TaskEntity
from taskboard.domain.exceptions import InvalidSortKeyException


@dataclass(frozen=True)
class TaskOrdering:
    """Ordering by one field, ascending unless descending is set."""

    field: TaskField
    descending: bool = False

    def apply(self, tasks: Iterable[TaskEntity]) -> list[TaskEntity]:
        """Return tasks sorted by this ordering. Stable: ties keep their input order."""
        return sorted(tasks, key=self.field.sort_key, reverse=self.descending)


def resolve_sort(token: str) -> TaskOrdering:
    """Parse a sort token such as "title", "+title" or "-severity".

    Raises:
        InvalidSortKeyException: If the token does not name a sortable field.
    """
    name = token.strip()
    descending = name.startswith("-")
    if name[:1] in ("-", "+"):
        name = name[1:].strip()
    field = TASK_FIELDS.get(name)
    if field is None:
        raise InvalidSortKeyException(token, FIELD_NAMES)
    return TaskOrdering(field=field, descending=descending)


def sort_tasks(tasks: Iterable[TaskEntity], token: str | None) -> list[TaskEntity]:
    """Sort tasks by token; a missing or blank token keeps the input order."""
    if token is None or not token.strip():
        return list(tasks)
    return resolve_sort(token).apply(tasks)
