"""Filter matcher for task search and export."""

from __future__ import annotations

from typing import Iterable

from taskboard.application.dtos.task import TaskFilters
from taskboard.domain.entities.task import TaskEntity


def _starts_with(value: str, prefix: str | None) -> bool:
    """Case-insensitive prefix match; an unset prefix always matches."""
    if prefix is None:
        return True
    return value.lower().startswith(prefix.lower())


def matches(task: TaskEntity, filters: TaskFilters) -> bool:
    """Return True iff task satisfies every predicate set in filters."""
    return (
        _starts_with(task.title, filters.title)
        and _starts_with(task.description, filters.description)
        and _starts_with(task.assigned_to, filters.assigned_to)
        and (filters.status is None or task.status == filters.status)
        and (filters.severity is None or task.severity == filters.severity)
    )


def filter_tasks(tasks: Iterable[TaskEntity], filters: TaskFilters) -> list[TaskEntity]:
    """Return the matching tasks, preserving input order."""
    return [task for task in tasks if matches(task, filters)]
