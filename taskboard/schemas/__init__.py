"""Pydantic request/response schemas for the API."""

from taskboard.schemas.health import HealthResponse
from taskboard.schemas.task import (
    BulkCreateFailureItem,
    BulkCreateResponse,
    TaskCreateRequest,
    TaskPatchRequest,
    TaskResponse,
)

__all__ = [
    "BulkCreateFailureItem",
    "BulkCreateResponse",
    "HealthResponse",
    "TaskCreateRequest",
    "TaskPatchRequest",
    "TaskResponse",
]
