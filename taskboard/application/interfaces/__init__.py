"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from taskboard.infrastructure or taskboard.api.
"""

from taskboard.application.interfaces.repositories import ITaskRepository

__all__ = [
    "ITaskRepository",
]
