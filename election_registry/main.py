"""Election Registry API — production entry point.

Run with an ASGI server, e.g.::

    uvicorn election_registry.main:app --port 8123

Invariants:
    - One DatabaseSessionManager and one SqlElectionRepository per built app
    - Logging configured and schema created on startup, engine disposed on shutdown (lifespan)
    - Importing this module configures nothing; the engine connects lazily
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from election_registry.application import create_app
from election_registry.config import Settings, get_settings
from election_registry.infrastructure.database import DatabaseSessionManager
from election_registry.infrastructure.observability import setup_logging
from election_registry.infrastructure.sql_repository import SqlElectionRepository

logger = logging.getLogger(__name__)


def build_app(settings: Settings | None = None) -> FastAPI:
    """Assemble the SQL-backed application from settings."""
    settings = settings or get_settings()
    db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    repository = SqlElectionRepository(db)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info("Starting up...")
        await db.create_schema()
        logger.info("Election Registry API started")
        yield
        logger.info("Election Registry API shutting down")
        await db.dispose()

    return create_app(repository, settings=settings, lifespan=lifespan)


app = build_app()
