"""Election Routes — create, list and fetch elections.

Invariants:
    - POST validates the name before any storage call (parse → validate → persist → respond)
    - GET /elections returns [] when empty, never null
    - Storage failures never reach the client as text (see api/error_handlers.py)
"""

from fastapi import APIRouter, Depends, Request, status

from election_registry.api.dependencies import decode_body, get_repository
from election_registry.core.domain_types import parse_identifier
from election_registry.core.entities import NewElection, require_name
from election_registry.core.repository_protocols import ElectionRepository
from election_registry.schemas.election import ElectionCreate, ElectionResponse

router = APIRouter(prefix="/elections", tags=["elections"])


@router.post(
    "", response_model=ElectionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_election(
    request: Request,
    repository: ElectionRepository = Depends(get_repository),
):
    """Create an election with a unique, non-empty name."""
    payload = await decode_body(request, ElectionCreate)
    election = NewElection(name=payload.name)
    require_name(election, "Election")
    election_id = await repository.add_election(election)
    return ElectionResponse(id=election_id, name=election.name)


@router.get("", response_model=list[ElectionResponse])
async def list_elections(
    repository: ElectionRepository = Depends(get_repository),
):
    """List all elections in creation order."""
    elections = await repository.list_elections()
    return [ElectionResponse.from_entity(e) for e in elections]


@router.get("/{election_id}", response_model=ElectionResponse)
async def get_election(
    election_id: str,
    repository: ElectionRepository = Depends(get_repository),
):
    """Get one election by id."""
    election = await repository.get_election(parse_identifier(election_id))
    return ElectionResponse.from_entity(election)
