"""Infrastructure — database engine, repository implementations, logging.

Invariants:
    - Only this layer imports SQLAlchemy sessions or driver exceptions
    - Every repository satisfies core.repository_protocols.ElectionRepository
"""
