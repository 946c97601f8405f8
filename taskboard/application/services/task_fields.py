"""Task field registry and sparse projection.

Maps each public (wire) field name to a typed accessor once, at import time.
Projection and sorting look fields up here instead of reflecting on the entity.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable

from taskboard.domain.entities.task import TaskEntity
from taskboard.domain.enums import TaskSeverity, TaskStatus
from taskboard.domain.exceptions import InvalidFieldsException


def _declaration_rank(enum_cls: type[Enum]) -> Callable[[Enum], int]:
    """Return a key function that orders members of enum_cls by declaration order."""
    ranks = {member: position for position, member in enumerate(enum_cls)}
    return ranks.__getitem__


@dataclass(frozen=True)
class TaskField:
    """A task field addressable by name.

    Attributes:
        name: Wire name (as used in JSON, X-Fields and X-Sort).
        get: Returns the typed value from the entity.
        sort_key: Returns a value that orders tasks by this field.
    """

    name: str
    get: Callable[[TaskEntity], Any]
    sort_key: Callable[[TaskEntity], Any]

    def serialize(self, task: TaskEntity) -> Any:
        """Return the JSON-ready value (enums become their string value)."""
        value = self.get(task)
        return value.value if isinstance(value, Enum) else value


def _string_field(name: str, get: Callable[[TaskEntity], str]) -> TaskField:
    return TaskField(name=name, get=get, sort_key=get)


def _enum_field(name: str, get: Callable[[TaskEntity], Enum], enum_cls: type[Enum]) -> TaskField:
    rank = _declaration_rank(enum_cls)
    return TaskField(name=name, get=get, sort_key=lambda task: rank(get(task)))


TASK_FIELDS: dict[str, TaskField] = {
    field.name: field
    for field in (
        _string_field("id", lambda task: task.id),
        _string_field("title", lambda task: task.title),
        _string_field("description", lambda task: task.description),
        _string_field("assignedTo", lambda task: task.assigned_to),
        _enum_field("status", lambda task: task.status, TaskStatus),
        _enum_field("severity", lambda task: task.severity, TaskSeverity),
    )
}

FIELD_NAMES: list[str] = list(TASK_FIELDS)


def parse_field_list(fields: str | Iterable[str]) -> list[str]:
    """Split a comma-separated field list into validated names.

    Whitespace is stripped, empty entries are dropped and duplicates collapse
    (first occurrence wins).

    Raises:
        InvalidFieldsException: If any name is not a task field.
    """
    raw = fields.split(",") if isinstance(fields, str) else fields
    names: list[str] = []
    for entry in raw:
        name = entry.strip()
        if name and name not in names:
            names.append(name)
    unknown = [name for name in names if name not in TASK_FIELDS]
    if unknown:
        raise InvalidFieldsException(unknown, FIELD_NAMES)
    return names


def task_to_dict(task: TaskEntity) -> dict[str, Any]:
    """Full JSON-ready representation of a task."""
    return {name: field.serialize(task) for name, field in TASK_FIELDS.items()}


def project_task(task: TaskEntity, fields: str | Iterable[str]) -> dict[str, Any]:
    """Return only the requested fields of task, in request order.

    A blank field list yields the full representation.
    """
    names = parse_field_list(fields)
    if not names:
        return task_to_dict(task)
    return {name: TASK_FIELDS[name].serialize(task) for name in names}
