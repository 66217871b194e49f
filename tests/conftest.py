"""Root conftest — shared repositories, settings and HTTP clients.

Invariants:
    - Every test gets a fresh repository; nothing is shared between tests
    - `repository` runs each dependent test against BOTH the in-memory store and
      SQLite in-memory through SqlElectionRepository
    - Apps are built with create_app(repository) — no global state to patch

Design Decisions:
    - SQLite in-memory: fast, no external dependency, enforces the same UNIQUE
      constraints the production schema declares
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Ensure tests never touch a real database file
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from election_registry.application import create_app  # noqa: E402
from election_registry.config import Settings  # noqa: E402
from election_registry.infrastructure.database import DatabaseSessionManager  # noqa: E402
from election_registry.infrastructure.memory_repository import InMemoryElectionRepository  # noqa: E402
from election_registry.infrastructure.sql_repository import SqlElectionRepository  # noqa: E402

MEMORY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def settings():
    return Settings(
        database_url=MEMORY_DATABASE_URL,
        cors_origins=["http://test"],
        log_format="text",
    )


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager(MEMORY_DATABASE_URL)
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
async def sql_repository(db_manager):
    return SqlElectionRepository(db_manager)


@pytest.fixture(params=["memory", "sql"])
async def repository(request):
    """Each dependent test runs once per ElectionRepository implementation."""
    if request.param == "memory":
        yield InMemoryElectionRepository()
        return
    manager = DatabaseSessionManager(MEMORY_DATABASE_URL)
    await manager.create_schema()
    yield SqlElectionRepository(manager)
    await manager.dispose()


@pytest.fixture
def make_client(settings):
    """Factory: AsyncClient over a fresh app wrapping the given repository."""
    def _make(repo, raise_app_exceptions: bool = True) -> AsyncClient:
        app = create_app(repo, settings=settings)
        return AsyncClient(
            transport=ASGITransport(
                app=app, raise_app_exceptions=raise_app_exceptions,
            ),
            base_url="http://test",
        )
    return _make


@pytest.fixture
async def client(repository, make_client):
    async with make_client(repository) as c:
        yield c


@pytest.fixture
async def seed_election(client):
    """Create one election over HTTP and return its JSON."""
    res = await client.post("/elections", json={"name": "Seed Election"})
    assert res.status_code == 201
    return res.json()


@pytest.fixture(params=["memory", "sql-file"])
async def concurrent_repository(request, tmp_path):
    """Repositories for concurrent writes: SQLite on a file, one connection per session.

    In-memory SQLite shares a single connection (StaticPool), so overlapping
    transactions there would not be independent.
    """
    if request.param == "memory":
        yield InMemoryElectionRepository()
        return
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'concurrent.db'}",
    )
    await manager.create_schema()
    yield SqlElectionRepository(manager)
    await manager.dispose()
