"""SQLAlchemy Declarative Base — shared base class and id column type for all ORM models.

Invariants:
    - Identifier spans the same range parse_identifier accepts (signed 64-bit)

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - SQLite keeps plain INTEGER so primary keys stay rowid aliases
"""

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import DeclarativeBase

Identifier = BigInteger().with_variant(Integer(), "sqlite")


class Base(DeclarativeBase):
    """Base class for all registry ORM models."""
    pass
