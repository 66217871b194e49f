"""ORM Models — SQLAlchemy declarative models for elections and candidates.

Invariants:
    - All models inherit from Base (db/base.py)
    - Election is the aggregate root; candidates are scoped by election_id

Design Decisions:
    - All models imported here so string-based relationship() references resolve
      before any query runs
"""

from election_registry.models.election import Election  # noqa: F401
from election_registry.models.candidate import Candidate  # noqa: F401
