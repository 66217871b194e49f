"""Election Schemas — request and response shapes for /elections.

Invariants:
    - ElectionCreate.name defaults to "" so a missing key hits the empty-name rule
    - name must be a JSON string; numbers and null are malformed, not coerced
    - Unknown fields (id included) are ignored: ids come from storage
"""

from pydantic import BaseModel, ConfigDict

from election_registry.core.entities import Election


class ElectionCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""


class ElectionResponse(BaseModel):
    id: int
    name: str

    @classmethod
    def from_entity(cls, election: Election) -> "ElectionResponse":
        return cls(id=election.id, name=election.name)
