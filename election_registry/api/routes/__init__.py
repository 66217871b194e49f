"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Path identifiers arrive as raw strings and are parsed by the handler
"""
