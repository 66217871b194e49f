"""Domain Types — identity types and path identifier parsing.

Invariants:
    - ElectionId, CandidateId wrap int — ids are always assigned by storage
    - parse_identifier accepts ASCII decimal digits only (no sign, no whitespace)
    - Parsed ids fit a signed 64-bit column; anything larger cannot exist

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Out-of-range ids rejected as invalid (400) rather than reaching storage
"""

import re
from typing import NewType

from election_registry.core.errors import InvalidIdentifierError


# ─── Identity Types ──────────────────────────────────────────────

ElectionId = NewType("ElectionId", int)
CandidateId = NewType("CandidateId", int)


MAX_IDENTIFIER = 2**63 - 1
_DIGITS = re.compile(r"[0-9]+")


def parse_identifier(raw: str) -> int:
    """Parse a path segment into a non-negative integer id."""
    if not _DIGITS.fullmatch(raw):
        raise InvalidIdentifierError(raw)
    value = int(raw)
    if value > MAX_IDENTIFIER:
        raise InvalidIdentifierError(raw)
    return value
