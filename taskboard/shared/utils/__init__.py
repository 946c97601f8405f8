"""Shared utilities: generators."""

from taskboard.shared.utils.generators import generate_cuid

__all__ = [
    "generate_cuid",
]
