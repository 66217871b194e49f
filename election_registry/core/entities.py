"""Entities — Election and Candidate records plus the shared name rule.

Invariants:
    - New* records carry no id; ids exist only on persisted records
    - NewCandidate.election_id comes from the resolved parent Election, never the body
    - An entity is invalid iff its name is the empty string (checked before storage)

Design Decisions:
    - Frozen dataclasses: records are immutable once built
    - NamedEntity as Protocol: require_name reads .name structurally,
      no reflection and no shared base class
"""

from dataclasses import dataclass
from typing import Protocol

from election_registry.core.domain_types import ElectionId, CandidateId
from election_registry.core.errors import EmptyNameError


class NamedEntity(Protocol):
    """Anything that exposes a display name."""
    name: str


@dataclass(frozen=True)
class NewElection:
    name: str


@dataclass(frozen=True)
class NewCandidate:
    name: str
    election_id: ElectionId


@dataclass(frozen=True)
class Election:
    id: ElectionId
    name: str


@dataclass(frozen=True)
class Candidate:
    id: CandidateId
    name: str
    election_id: ElectionId


def require_name(entity: NamedEntity, entity_type: str) -> None:
    """Raise EmptyNameError when the entity's name is empty."""
    if len(entity.name) == 0:
        raise EmptyNameError(entity_type)
