"""Bootstrap — build_app wires the SQL repository and runs the lifespan.

Invariants:
    - Schema is created on startup, so a fresh database file serves requests
    - Logging is configured by the lifespan, not by building or importing
    - Each build_app call owns its own engine and repository
"""

import logging

import pytest
from httpx import ASGITransport, AsyncClient

from election_registry.config import Settings


@pytest.fixture
def restore_logging():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


async def test_build_app_serves_after_startup(tmp_path, restore_logging):
    from election_registry.main import build_app

    settings = Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'elections.db'}",
        log_format="text",
    )
    app = build_app(settings)

    async with app.router.lifespan_context(app):
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as client:
            res = await client.post("/elections", json={"name": "Boot"})
            assert res.status_code == 201
            res = await client.get("/elections")
            assert res.json() == [{"id": 1, "name": "Boot"}]
            assert (await client.get("/health/ready")).status_code == 200


async def test_logging_configured_on_startup_not_on_build(tmp_path, restore_logging):
    from election_registry.main import build_app

    settings = Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'elections.db'}",
        log_format="text",
    )
    before = list(logging.root.handlers)
    app = build_app(settings)
    assert logging.root.handlers == before

    async with app.router.lifespan_context(app):
        assert len(logging.root.handlers) == len(before) + 1
