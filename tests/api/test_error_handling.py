"""Error Handling — opaque 500s, logging before the response, app isolation.

Invariants:
    - StorageError → 500 "Server error"; the cause is logged, never returned
    - Unhandled exceptions → 500 "Server error"
    - Apps built on different repositories never share rows
"""

import logging

from election_registry.core.errors import StorageError
from election_registry.infrastructure.memory_repository import InMemoryElectionRepository


class _BrokenRepository(InMemoryElectionRepository):
    """Fails every write with a storage error carrying driver detail."""

    async def add_election(self, election):
        raise StorageError(
            "insert", cause=RuntimeError("disk I/O error at page 42"),
        )

    async def list_elections(self):
        raise RuntimeError("unexpected bug")

    async def health_check(self):
        return False


async def test_storage_error_is_opaque_500(make_client, caplog):
    caplog.set_level(logging.INFO)
    async with make_client(_BrokenRepository()) as client:
        res = await client.post("/elections", json={"name": "Doomed"})

    assert res.status_code == 500
    assert res.text == "Server error"
    assert "disk I/O" not in res.text

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert errors
    assert errors[-1].error_code == "STORAGE_ERROR"
    assert errors[-1].severity == "critical"
    assert errors[-1].path == "/elections"
    assert "disk I/O error at page 42" in caplog.text


async def test_validation_runs_before_storage(make_client):
    async with make_client(_BrokenRepository()) as client:
        res = await client.post("/elections", json={"name": ""})
    assert res.status_code == 400
    assert res.text == "Empty name forbidden."


async def test_unhandled_exception_is_opaque_500(make_client, caplog):
    async with make_client(
        _BrokenRepository(), raise_app_exceptions=False,
    ) as client:
        res = await client.get("/elections")
    assert res.status_code == 500
    assert res.text == "Server error"
    assert "unexpected bug" in caplog.text


async def test_apps_do_not_share_storage(make_client):
    async with make_client(InMemoryElectionRepository()) as first, \
            make_client(InMemoryElectionRepository()) as second:
        await first.post("/elections", json={"name": "Only first"})
        assert (await second.get("/elections")).json() == []
        res = await second.post("/elections", json={"name": "Only first"})
        assert res.status_code == 201


async def test_apps_share_storage_when_given_same_repository(make_client):
    shared = InMemoryElectionRepository()
    async with make_client(shared) as first, make_client(shared) as second:
        await first.post("/elections", json={"name": "Shared"})
        res = await second.post("/elections", json={"name": "Shared"})
        assert res.status_code == 400
        assert res.text == "Name taken."
