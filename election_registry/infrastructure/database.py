"""Database Session Manager — async engine, sessions with automatic rollback, health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - IntegrityError maps to ConstraintViolationError; every other SQLAlchemyError
      maps to StorageError (core/errors.py)
    - SQLite connections run with foreign keys enabled
    - One manager per application instance, passed in explicitly (no module singleton)

Design Decisions:
    - In-memory SQLite uses StaticPool: all sessions must see the same database
    - Pool sizing applies only to server databases (SQLite pools reject it)
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from election_registry import models  # noqa: F401
from election_registry.core.errors import ConstraintViolationError, StorageError
from election_registry.db.base import Base

logger = logging.getLogger(__name__)


def _engine_options(
    database_url: str, pool_size: int, max_overflow: int,
) -> dict:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return {
            "pool_size": pool_size,
            "max_overflow": max_overflow,
            "pool_pre_ping": True,
            "pool_recycle": 3600,
        }
    if url.database in (None, "", ":memory:"):
        return {"poolclass": StaticPool}
    return {}


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions with error translation."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            **_engine_options(database_url, pool_size, max_overflow),
        )
        if self.engine.dialect.name == "sqlite":
            event.listen(
                self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys,
            )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(
        self, resource_type: str = "Record",
    ) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback and typed error translation."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.info(f"{resource_type} rejected by constraint: {e.orig}")
            raise ConstraintViolationError(resource_type) from e
        except SQLAlchemyError as e:
            await session.rollback()
            raise StorageError(type(e).__name__, cause=e) from e
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create missing tables (idempotent)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Tables successfully created.")

    async def drop_schema(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()
