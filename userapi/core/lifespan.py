"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (database handle,
schema bootstrap, pool dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from userapi.core.config import Settings
from userapi.infrastructure.persistence.database import Database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: build the Database from app.state.settings, check connectivity,
    create the users table and trigger if absent. A store that is down at
    startup aborts the boot.
    Shutdown (after uvicorn has drained in-flight requests or hit the
    graceful-shutdown deadline): dispose the connection pool.
    """
    settings: Settings = app.state.settings

    # ---- Startup ----
    database = Database(settings)
    try:
        await database.ping()
        await database.create_schema()
    except Exception:
        logger.exception(
            "Failed to initialize database at %s:%s/%s",
            settings.db_host,
            settings.db_port,
            settings.db_name,
        )
        await database.dispose()
        raise
    app.state.database = database

    yield

    # ---- Shutdown ----
    app.state.database = None
    await database.dispose()
