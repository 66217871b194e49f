"""Candidate ORM — a named entry scoped to one election.

Invariants:
    - Always belongs to an Election (election_id FK)
    - (name, election_id) is unique; the same name may appear in other elections
"""

from sqlalchemy import ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from election_registry.db.base import Base, Identifier


class Candidate(Base):
    __tablename__ = "candidates"
    __table_args__ = (
        UniqueConstraint(
            "name", "election_id", name="uq_candidates_name_election",
        ),
    )

    id: Mapped[int] = mapped_column(
        Identifier, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    election_id: Mapped[int] = mapped_column(
        Identifier, ForeignKey("elections.id"), nullable=False, index=True,
    )

    election: Mapped["Election"] = relationship(
        "Election", back_populates="candidates", lazy="raise",
    )
