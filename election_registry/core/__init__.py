"""Core Layer — entities, identifiers, errors and the persistence contract.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
    - No IO; the only async code is the Protocol signatures
"""
