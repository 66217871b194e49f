"""API Layer — FastAPI routes, request decoding and error handlers.

Invariants:
    - Routes registered explicitly in application.create_app (no auto-discovery)
    - Error responses are plain text; success responses are JSON
"""
