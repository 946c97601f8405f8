"""Application services: filtering, field projection, sorting, export."""

from taskboard.application.services.task_export import (
    SERIALIZERS,
    ExportFormat,
    write_tasks_csv,
    write_tasks_xml,
)
from taskboard.application.services.task_fields import (
    FIELD_NAMES,
    TASK_FIELDS,
    TaskField,
    parse_field_list,
    project_task,
    task_to_dict,
)
from taskboard.application.services.task_filter import filter_tasks, matches
from taskboard.application.services.task_sorting import (
    TaskOrdering,
    resolve_sort,
    sort_tasks,
)

__all__ = [
    "ExportFormat",
    "FIELD_NAMES",
    "SERIALIZERS",
    "TASK_FIELDS",
    "TaskField",
    "TaskOrdering",
    "filter_tasks",
    "matches",
    "parse_field_list",
    "project_task",
    "resolve_sort",
    "sort_tasks",
    "task_to_dict",
    "write_tasks_csv",
    "write_tasks_xml",
]
