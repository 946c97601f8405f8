"""ORM models. Importing this package registers every table on Base.metadata."""

from taskboard.infrastructure.persistence.models.task import Task

__all__ = [
    "Task",
]
