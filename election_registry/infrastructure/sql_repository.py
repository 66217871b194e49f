"""SQL Election Repository — ElectionRepository over SQLAlchemy async sessions.

Invariants:
    - Uniqueness is enforced by database constraints inside the insert transaction
      (no check-then-insert)
    - Lists are ordered by primary key, which is insertion order
    - ORM rows never leave this module; callers get core entities

Design Decisions:
    - Error translation lives in DatabaseSessionManager.session(): this module only
      raises ResourceNotFoundError itself
"""

import logging
from typing import Sequence

from sqlalchemy import select

from election_registry.core.domain_types import CandidateId, ElectionId
from election_registry.core.entities import (
    Candidate, Election, NewCandidate, NewElection,
)
from election_registry.core.errors import ResourceNotFoundError
from election_registry.infrastructure.database import DatabaseSessionManager
from election_registry.models.candidate import Candidate as CandidateModel
from election_registry.models.election import Election as ElectionModel

logger = logging.getLogger(__name__)


def _to_election(row: ElectionModel) -> Election:
    return Election(id=ElectionId(row.id), name=row.name)


def _to_candidate(row: CandidateModel) -> Candidate:
    return Candidate(
        id=CandidateId(row.id),
        name=row.name,
        election_id=ElectionId(row.election_id),
    )


class SqlElectionRepository:
    """Relational store for elections and candidates."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def add_election(self, election: NewElection) -> ElectionId:
        async with self._db.session("Election") as db:
            row = ElectionModel(name=election.name)
            db.add(row)
            await db.commit()
            logger.info(f"Election {row.id} created")
            return ElectionId(row.id)

    async def get_election(self, election_id: int) -> Election:
        async with self._db.session("Election") as db:
            row = await db.get(ElectionModel, election_id)
            if row is None:
                raise ResourceNotFoundError("Election", election_id)
            return _to_election(row)

    async def list_elections(self) -> Sequence[Election]:
        async with self._db.session("Election") as db:
            result = await db.execute(
                select(ElectionModel).order_by(ElectionModel.id),
            )
            return [_to_election(row) for row in result.scalars().all()]

    async def add_candidate(self, candidate: NewCandidate) -> CandidateId:
        async with self._db.session("Candidate") as db:
            row = CandidateModel(
                name=candidate.name, election_id=candidate.election_id,
            )
            db.add(row)
            await db.commit()
            logger.info(
                f"Candidate {row.id} created in election {row.election_id}",
            )
            return CandidateId(row.id)

    async def get_candidate(
        self, election_id: int, candidate_id: int,
    ) -> Candidate:
        async with self._db.session("Candidate") as db:
            result = await db.execute(
                select(CandidateModel).where(
                    CandidateModel.id == candidate_id,
                    CandidateModel.election_id == election_id,
                ),
            )
            row = result.scalar_one_or_none()
            if row is None:
                raise ResourceNotFoundError("Candidate", candidate_id)
            return _to_candidate(row)

    async def list_candidates(self, election_id: int) -> Sequence[Candidate]:
        async with self._db.session("Candidate") as db:
            result = await db.execute(
                select(CandidateModel)
                .where(CandidateModel.election_id == election_id)
                .order_by(CandidateModel.id),
            )
            return [_to_candidate(row) for row in result.scalars().all()]

    async def health_check(self) -> bool:
        return await self._db.health_check()
