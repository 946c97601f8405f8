"""Logging configuration for the Taskboard service."""

import logging
import sys

from taskboard.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise settings.log_level.
    Output goes to stdout. SQL statement logging is only left on when
    database_echo is set.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    if not settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
