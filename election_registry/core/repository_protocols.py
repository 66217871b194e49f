"""Boundary Protocols — the persistence contract between routes and storage.

Invariants:
    - Routes NEVER import a concrete repository — they receive one via dependency injection
    - Ids are assigned by the implementation, never supplied by the caller
    - Uniqueness (election name; candidate name per election) is atomic with the insert
    - Failures surface only as ResourceNotFoundError, ConstraintViolationError or StorageError

Design Decisions:
    - Protocol over ABC: structural subtyping, SQL and in-memory stores need no common base
    - add_candidate does not check that the election exists: routes resolve the parent
      first so a missing election maps to 404 regardless of the payload
    - Async in Protocol: implementations do IO
"""

from typing import Protocol, Sequence

from election_registry.core.domain_types import ElectionId, CandidateId
from election_registry.core.entities import (
    Candidate, Election, NewCandidate, NewElection,
)


class ElectionRepository(Protocol):
    """Contract for election and candidate persistence."""

    async def add_election(self, election: NewElection) -> ElectionId:
        """Insert; ConstraintViolationError if the name exists."""
        ...

    async def get_election(self, election_id: int) -> Election:
        """ResourceNotFoundError if no row matches."""
        ...

    async def list_elections(self) -> Sequence[Election]:
        """All elections in insertion order; empty when none."""
        ...

    async def add_candidate(self, candidate: NewCandidate) -> CandidateId:
        """Insert; ConstraintViolationError if (name, election_id) exists."""
        ...

    async def get_candidate(
        self, election_id: int, candidate_id: int,
    ) -> Candidate:
        """ResourceNotFoundError unless both keys match one row."""
        ...

    async def list_candidates(self, election_id: int) -> Sequence[Candidate]:
        """Candidates of one election in insertion order."""
        ...

    async def health_check(self) -> bool: ...
