"""Election Registry — HTTP service for elections and their candidates.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
