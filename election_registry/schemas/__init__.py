"""API Schemas — pydantic models for request bodies and response payloads."""
