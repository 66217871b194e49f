"""Concurrent Writes — uniqueness holds when inserts race.

Invariants:
    - N simultaneous inserts of one name produce exactly one id; every other
      attempt fails with ConstraintViolationError
    - Same for candidates sharing (name, election_id)
    - Over HTTP the race resolves to one 201 and N-1 "Name taken." responses

Design Decisions:
    - asyncio.gather with return_exceptions=True: losers are collected, not raised
"""

import asyncio

from election_registry.core.entities import NewCandidate, NewElection
from election_registry.core.errors import ConstraintViolationError

ATTEMPTS = 10


def _split(results):
    ids = [r for r in results if isinstance(r, int)]
    failures = [r for r in results if isinstance(r, BaseException)]
    return ids, failures


async def test_concurrent_duplicate_elections_insert_once(concurrent_repository):
    results = await asyncio.gather(
        *(
            concurrent_repository.add_election(NewElection(name="Same"))
            for _ in range(ATTEMPTS)
        ),
        return_exceptions=True,
    )

    ids, failures = _split(results)
    assert len(ids) == 1
    assert len(failures) == ATTEMPTS - 1
    assert all(isinstance(f, ConstraintViolationError) for f in failures)
    elections = await concurrent_repository.list_elections()
    assert [e.name for e in elections] == ["Same"]


async def test_concurrent_duplicate_candidates_insert_once(concurrent_repository):
    election_id = await concurrent_repository.add_election(
        NewElection(name="General"),
    )
    results = await asyncio.gather(
        *(
            concurrent_repository.add_candidate(
                NewCandidate(name="Ada", election_id=election_id),
            )
            for _ in range(ATTEMPTS)
        ),
        return_exceptions=True,
    )

    ids, failures = _split(results)
    assert len(ids) == 1
    assert all(isinstance(f, ConstraintViolationError) for f in failures)
    assert len(await concurrent_repository.list_candidates(election_id)) == 1


async def test_concurrent_duplicate_posts_one_created(
    concurrent_repository, make_client,
):
    async with make_client(concurrent_repository) as client:
        responses = await asyncio.gather(*(
            client.post("/elections", json={"name": "Same"})
            for _ in range(ATTEMPTS)
        ))

        codes = sorted(r.status_code for r in responses)
        assert codes == [201] + [400] * (ATTEMPTS - 1)
        assert all(
            r.text == "Name taken." for r in responses if r.status_code == 400
        )
        assert len((await client.get("/elections")).json()) == 1
