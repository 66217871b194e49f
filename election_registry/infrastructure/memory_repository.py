"""In-Memory Election Repository — dict-backed ElectionRepository.

Invariants:
    - A single asyncio.Lock guards every write: uniqueness check and insert are one step
    - Ids start at 1 and increase per table, never reused
    - Dicts preserve insertion order, so lists come back in insertion order

Design Decisions:
    - Same error contract as the SQL repository, so route tests can run against it
    - Instance state only: two repositories never share rows
"""

import asyncio
from typing import Sequence

from election_registry.core.domain_types import CandidateId, ElectionId
from election_registry.core.entities import (
    Candidate, Election, NewCandidate, NewElection,
)
from election_registry.core.errors import (
    ConstraintViolationError, ResourceNotFoundError,
)


class InMemoryElectionRepository:
    """Process-local store, for tests and throwaway instances."""

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._elections: dict[int, Election] = {}
        self._candidates: dict[int, Candidate] = {}
        self._next_election_id = 1
        self._next_candidate_id = 1

    async def add_election(self, election: NewElection) -> ElectionId:
        async with self._lock:
            if any(e.name == election.name for e in self._elections.values()):
                raise ConstraintViolationError("Election")
            election_id = ElectionId(self._next_election_id)
            self._next_election_id += 1
            self._elections[election_id] = Election(
                id=election_id, name=election.name,
            )
            return election_id

    async def get_election(self, election_id: int) -> Election:
        election = self._elections.get(election_id)
        if election is None:
            raise ResourceNotFoundError("Election", election_id)
        return election

    async def list_elections(self) -> Sequence[Election]:
        return list(self._elections.values())

    async def add_candidate(self, candidate: NewCandidate) -> CandidateId:
        async with self._lock:
            if any(
                c.name == candidate.name
                and c.election_id == candidate.election_id
                for c in self._candidates.values()
            ):
                raise ConstraintViolationError("Candidate")
            candidate_id = CandidateId(self._next_candidate_id)
            self._next_candidate_id += 1
            self._candidates[candidate_id] = Candidate(
                id=candidate_id,
                name=candidate.name,
                election_id=candidate.election_id,
            )
            return candidate_id

    async def get_candidate(
        self, election_id: int, candidate_id: int,
    ) -> Candidate:
        candidate = self._candidates.get(candidate_id)
        if candidate is None or candidate.election_id != election_id:
            raise ResourceNotFoundError("Candidate", candidate_id)
        return candidate

    async def list_candidates(self, election_id: int) -> Sequence[Candidate]:
        return [
            c for c in self._candidates.values()
            if c.election_id == election_id
        ]

    async def health_check(self) -> bool:
        return True
