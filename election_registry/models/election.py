"""Election ORM — persists the aggregate root.

Invariants:
    - id is an autoincrement integer primary key
    - name is non-nullable and globally unique (enforced by the database)

Design Decisions:
    - No cascade on candidates: elections are never deleted
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from election_registry.db.base import Base, Identifier


class Election(Base):
    """Election aggregate root — owns its candidates."""
    __tablename__ = "elections"

    id: Mapped[int] = mapped_column(
        Identifier, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        Text, nullable=False, unique=True,
    )

    candidates: Mapped[list["Candidate"]] = relationship(
        "Candidate", back_populates="election", lazy="raise",
    )
