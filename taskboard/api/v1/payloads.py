"""Request body parsing for task creation.

Create bodies are read raw so that a single endpoint can accept either one
task or (with X-Action: bulk) an array, and so that parse failures surface
as MalformedPayloadException instead of FastAPI's generic 422.
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from taskboard.application.dtos.task import TaskData
from taskboard.domain.exceptions import MalformedPayloadException
from taskboard.schemas.task import BulkCreateFailureItem, TaskCreateRequest

_ITEMS_ADAPTER = TypeAdapter(list[Any])


def _errors(e: ValidationError) -> list[dict[str, Any]]:
    return e.errors(include_url=False, include_context=False, include_input=False)


def parse_task_payload(body: bytes) -> TaskData:
    """Parse one task from a JSON body.

    Raises:
        MalformedPayloadException: If the body is not valid JSON or not a valid task.
    """
    try:
        return TaskCreateRequest.model_validate_json(body).to_data()
    except ValidationError as e:
        raise MalformedPayloadException(errors=_errors(e)) from e


def parse_bulk_payload(
    body: bytes,
) -> tuple[list[int], list[TaskData], list[BulkCreateFailureItem]]:
    """Parse a JSON array of tasks, item by item.

    Returns (positions, items, rejected): items are the valid entries and
    positions their indexes in the request array; rejected lists the entries
    that failed validation. Only a body that is not a JSON array fails as a whole.

    Raises:
        MalformedPayloadException: If the body is not a JSON array.
    """
    try:
        raw_items = _ITEMS_ADAPTER.validate_json(body)
    except ValidationError as e:
        raise MalformedPayloadException(
            "Bulk payload must be a JSON array of tasks", errors=_errors(e)
        ) from e

    positions: list[int] = []
    items: list[TaskData] = []
    rejected: list[BulkCreateFailureItem] = []
    for index, raw in enumerate(raw_items):
        try:
            items.append(TaskCreateRequest.model_validate(raw).to_data())
            positions.append(index)
        except ValidationError as e:
            rejected.append(
                BulkCreateFailureItem(
                    index=index,
                    error="MALFORMED_PAYLOAD",
                    message="; ".join(
                        f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}"
                        for err in e.errors(include_url=False)
                    ),
                )
            )
    return positions, items, rejected
