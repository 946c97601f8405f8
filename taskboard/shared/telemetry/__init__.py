"""Shared telemetry: logging setup."""

from taskboard.shared.telemetry.logging import LOG_FORMAT, setup_logging

__all__ = [
    "LOG_FORMAT",
    "setup_logging",
]
