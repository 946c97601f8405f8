"""Shared utilities: logging setup and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from taskboard.shared.utils import generate_cuid

__all__ = [
    "generate_cuid",
]
