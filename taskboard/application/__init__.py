"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (task repositories).
"""

from taskboard.application.interfaces import ITaskRepository
from taskboard.application.use_cases.tasks import TaskQueryService

__all__ = [
    "ITaskRepository",
    "TaskQueryService",
]
