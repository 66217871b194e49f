"""Candidate Routes — candidates scoped to one election.

Invariants:
    - The parent election is resolved BEFORE the body is decoded: a missing
      election is always 404 whatever the payload
    - election_id of a new candidate comes from the resolved election, never the body
    - Candidate lookups require both ids to match
"""

from fastapi import APIRouter, Depends, Request, status

from election_registry.api.dependencies import decode_body, get_repository
from election_registry.core.domain_types import parse_identifier
from election_registry.core.entities import NewCandidate, require_name
from election_registry.core.repository_protocols import ElectionRepository
from election_registry.schemas.candidate import (
    CandidateCreate, CandidateResponse,
)

router = APIRouter(
    prefix="/elections/{election_id}/candidates", tags=["candidates"],
)


@router.post(
    "", response_model=CandidateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_candidate(
    election_id: str,
    request: Request,
    repository: ElectionRepository = Depends(get_repository),
):
    """Attach a candidate, unique by name within the election."""
    election = await repository.get_election(parse_identifier(election_id))
    payload = await decode_body(request, CandidateCreate)
    candidate = NewCandidate(name=payload.name, election_id=election.id)
    require_name(candidate, "Candidate")
    candidate_id = await repository.add_candidate(candidate)
    return CandidateResponse(
        id=candidate_id,
        name=candidate.name,
        election_id=candidate.election_id,
    )


@router.get("", response_model=list[CandidateResponse])
async def list_candidates(
    election_id: str,
    repository: ElectionRepository = Depends(get_repository),
):
    """List an election's candidates in creation order."""
    election = await repository.get_election(parse_identifier(election_id))
    candidates = await repository.list_candidates(election.id)
    return [CandidateResponse.from_entity(c) for c in candidates]


@router.get("/{candidate_id}", response_model=CandidateResponse)
async def get_candidate(
    election_id: str,
    candidate_id: str,
    repository: ElectionRepository = Depends(get_repository),
):
    """Get one candidate by election id and candidate id."""
    candidate = await repository.get_candidate(
        parse_identifier(election_id), parse_identifier(candidate_id),
    )
    return CandidateResponse.from_entity(candidate)
