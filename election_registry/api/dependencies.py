"""Request Dependencies — repository lookup and body decoding shared by routes.

Invariants:
    - The repository comes from app.state, set once by create_app
    - Bodies are decoded inside the handler, after any parent lookup, never by
      FastAPI's automatic body validation
"""

from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from election_registry.core.errors import MalformedPayloadError
from election_registry.core.repository_protocols import ElectionRepository

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def get_repository(request: Request) -> ElectionRepository:
    """FastAPI dependency for the application's persistence port."""
    return request.app.state.repository


async def decode_body(request: Request, schema: type[SchemaT]) -> SchemaT:
    """Decode the JSON request body into schema or raise MalformedPayloadError."""
    raw = await request.body()
    try:
        return schema.model_validate_json(raw)
    except ValidationError as e:
        raise MalformedPayloadError(e.errors()[0]["msg"]) from e
