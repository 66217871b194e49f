"""Initial schema — elections and candidates.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# Signed 64-bit ids; SQLite keeps INTEGER so primary keys alias rowid
IDENTIFIER = sa.BigInteger().with_variant(sa.Integer(), "sqlite")

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "elections",
        sa.Column("id", IDENTIFIER, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False, unique=True),
    )
    op.create_table(
        "candidates",
        sa.Column("id", IDENTIFIER, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column(
            "election_id", IDENTIFIER,
            sa.ForeignKey("elections.id"), nullable=False,
        ),
        sa.UniqueConstraint(
            "name", "election_id", name="uq_candidates_name_election",
        ),
    )
    op.create_index(
        "ix_candidates_election_id", "candidates", ["election_id"],
    )


def downgrade() -> None:
    op.drop_index("ix_candidates_election_id", table_name="candidates")
    op.drop_table("candidates")
    op.drop_table("elections")
