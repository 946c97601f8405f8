"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (SQL schema, engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from taskboard.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: create the task table when the postgres backend is selected.
    Shutdown: dispose the SQL engine if one was created.
    """
    settings = get_settings()

    # ---- Startup ----
    if settings.database_backend == "postgres":
        from taskboard.infrastructure.persistence.database import init_models

        await init_models()
    logger.info(
        "%s %s started (backend=%s)",
        settings.app_name,
        settings.app_version,
        settings.database_backend,
    )

    yield

    # ---- Shutdown ----
    from taskboard.infrastructure.persistence.database import dispose_engine

    await dispose_engine()
