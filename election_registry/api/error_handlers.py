"""Error Handlers — global exception handlers mapping errors to plain-text responses.

Invariants:
    - ElectionRegistryError → its http_status with its plain-text message
    - StorageError and unhandled exceptions are logged with the cause before the
      500 response is written; the client only sees "Server error"

Design Decisions:
    - Two-layer handler: domain (ElectionRegistryError), catch-all (Exception)
    - Extracted from application.py to keep the assembly small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from election_registry.core.errors import ElectionRegistryError, StorageError

logger = logging.getLogger(__name__)

SERVER_ERROR_BODY = "Server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_registry_error_handler(app)
    _register_generic_error_handler(app)


def _register_registry_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ElectionRegistryError)
    async def registry_error_handler(
        request: Request, exc: ElectionRegistryError,
    ):
        """Handle all registry domain/infrastructure errors."""
        extra = {
            **exc.log_extra(),
            "path": request.url.path,
            "method": request.method,
        }
        if isinstance(exc, StorageError):
            logger.error(
                f"{exc.code}: {exc}",
                extra=extra, exc_info=exc.cause or exc,
            )
        else:
            logger.info(f"{exc.code}: {exc.message}", extra=extra)
        return PlainTextResponse(
            exc.to_response(), status_code=exc.http_status,
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
            extra={"path": request.url.path, "method": request.method},
        )
        return PlainTextResponse(
            SERVER_ERROR_BODY,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
