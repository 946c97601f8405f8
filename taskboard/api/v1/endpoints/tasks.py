"""Task API: thin routes delegating to TaskQueryService.

Search and single reads honor two optional headers: X-Fields (comma-separated
sparse field list) and X-Sort (field name, "-" prefix for descending).
"""

import io
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Header, Request, Response
from fastapi.responses import JSONResponse

from taskboard.api.v1.dependencies import get_task_filters, get_task_service
from taskboard.api.v1.payloads import parse_bulk_payload, parse_task_payload
from taskboard.application.dtos.task import TaskFilters
from taskboard.application.use_cases.tasks import TaskQueryService
from taskboard.core.limiter import (
    is_bulk_action,
    limit_bulk_action,
    limit_bulk_writes,
    limit_writes,
)
from taskboard.schemas.task import (
    BulkCreateResponse,
    TaskCreateRequest,
    TaskPatchRequest,
    TaskResponse,
)

router = APIRouter()

FieldsHeader = Annotated[
    str | None, Header(alias="X-Fields", description="Comma-separated fields to return")
]
SortHeader = Annotated[
    str | None, Header(alias="X-Sort", description="Field to sort by; prefix '-' for descending")
]
Service = Annotated[TaskQueryService, Depends(get_task_service)]
Filters = Annotated[TaskFilters, Depends(get_task_filters)]


async def _bulk_create(body: bytes, service: TaskQueryService) -> BulkCreateResponse:
    positions, items, rejected = parse_bulk_payload(body)
    result = await service.create_many(items)
    return BulkCreateResponse.from_result(result, positions, rejected)


@router.get(
    "",
    response_model=list[dict[str, Any]],
    responses={204: {"description": "No tasks match the filters"}},
)
async def search_tasks(
    service: Service,
    filters: Filters,
    fields: FieldsHeader = None,
    sort: SortHeader = None,
):
    """Search tasks by optional prefix/enum filters; 204 when nothing matches."""
    items = await service.list_projected(filters, sort=sort, fields=fields)
    if not items:
        return Response(status_code=204)
    return items


@router.get(
    "/export/{export_format}",
    response_class=Response,
    responses={
        200: {
            "description": "Tasks as a downloadable attachment",
            "content": {"application/csv": {}, "application/xml": {}},
        },
        400: {"description": "Unsupported export format"},
    },
)
async def export_tasks(
    export_format: str,
    service: Service,
    filters: Filters,
    sort: SortHeader = None,
) -> Response:
    """Export matching tasks as Tasks.csv or Tasks.xml."""
    buffer = io.StringIO()
    fmt = await service.export_tasks(export_format, buffer, filters=filters, sort=sort)
    return Response(
        content=buffer.getvalue(),
        media_type=fmt.media_type,
        headers={"Content-Disposition": f'attachment; filename="{fmt.filename}"'},
    )


@router.post(
    "",
    response_model=TaskResponse,
    status_code=201,
    responses={
        201: {"description": "Task created; Location points at it"},
        400: {"description": "Malformed payload"},
        409: {"description": "Task id already taken"},
    },
)
@limit_writes
@limit_bulk_action
async def create_task(
    request: Request,
    response: Response,
    service: Service,
    action: Annotated[
        str | None, Header(alias="X-Action", description="'bulk' to send an array")
    ] = None,
):
    """Create a task. With X-Action: bulk the body is an array (see POST /bulk)."""
    body = await request.body()
    if is_bulk_action(request):
        bulk = await _bulk_create(body, service)
        return JSONResponse(status_code=201, content=bulk.model_dump())
    task = await service.create_task(parse_task_payload(body))
    response.headers["Location"] = str(request.url_for("get_task", task_id=task.id))
    return TaskResponse.from_entity(task)


@router.post(
    "/bulk",
    response_model=BulkCreateResponse,
    status_code=201,
    responses={400: {"description": "Body is not a JSON array"}},
)
@limit_bulk_writes
async def create_tasks_bulk(request: Request, service: Service) -> BulkCreateResponse:
    """Create every task in the array independently; report per-item failures."""
    return await _bulk_create(await request.body(), service)


@router.head(
    "/{task_id}",
    status_code=204,
    responses={404: {"description": "Task not found"}},
)
async def check_task(task_id: str, service: Service) -> Response:
    """Existence check: 204 if the task exists, 404 otherwise."""
    found = await service.exists(task_id)
    return Response(status_code=204 if found else 404)


@router.get(
    "/{task_id}",
    response_model=dict[str, Any],
    name="get_task",
    responses={404: {"description": "Task not found"}},
)
async def get_task(task_id: str, service: Service, fields: FieldsHeader = None):
    """Get one task, optionally reduced to X-Fields."""
    return await service.get_projected(task_id, fields)


@router.put("/{task_id}", status_code=204, responses={404: {"description": "Task not found"}})
@limit_writes
async def replace_task(
    request: Request,
    task_id: str,
    body: TaskCreateRequest,
    service: Service,
) -> Response:
    """Replace every field of a task; the path id wins over any id in the body."""
    await service.replace_task(task_id, body.to_data())
    return Response(status_code=204)


@router.patch("/{task_id}", status_code=204, responses={404: {"description": "Task not found"}})
@limit_writes
async def patch_task(
    request: Request,
    task_id: str,
    body: TaskPatchRequest,
    service: Service,
) -> Response:
    """Update only the fields present (and non-null) in the body."""
    await service.patch_task(task_id, body.to_patch())
    return Response(status_code=204)


@router.delete("/{task_id}", status_code=204, responses={404: {"description": "Task not found"}})
@limit_writes
async def delete_task(request: Request, task_id: str, service: Service) -> Response:
    """Delete a task."""
    await service.delete_task(task_id)
    return Response(status_code=204)
