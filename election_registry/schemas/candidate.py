"""Candidate Schemas — request and response shapes for election candidates.

Invariants:
    - CandidateCreate carries only a name; a client-sent election_id is dropped
      because the path decides the owning election
"""

from pydantic import BaseModel, ConfigDict

from election_registry.core.entities import Candidate


class CandidateCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""


class CandidateResponse(BaseModel):
    id: int
    name: str
    election_id: int

    @classmethod
    def from_entity(cls, candidate: Candidate) -> "CandidateResponse":
        return cls(
            id=candidate.id,
            name=candidate.name,
            election_id=candidate.election_id,
        )
