"""Application Assembly — wires one persistence port and the routes into a FastAPI app.

Invariants:
    - The repository is passed in and stored on app.state; nothing is looked up globally
    - Two apps built from two repositories never share rows
    - Routes registered explicitly (no auto-discovery)
    - No logging setup, schema creation or socket handling here (see main.py)

Design Decisions:
    - Pure constructor over module-level app: tests build one app per repository
    - lifespan is optional so the production bootstrap can own startup/shutdown
"""

import logging
from typing import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from election_registry import __version__
from election_registry.api.error_handlers import register_error_handlers
from election_registry.api.routes import candidates, elections, health
from election_registry.config import Settings, get_settings
from election_registry.core.repository_protocols import ElectionRepository

logger = logging.getLogger(__name__)


def create_app(
    repository: ElectionRepository,
    settings: Settings | None = None,
    lifespan: Callable | None = None,
) -> FastAPI:
    """Build a servable app around the given repository."""
    logger.info("Creating application...")
    settings = settings or get_settings()

    app = FastAPI(
        title="Election Registry API", version=__version__, lifespan=lifespan,
    )
    app.state.repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    logger.info("Configuring routing...")
    app.include_router(health.router)
    app.include_router(elections.router)
    app.include_router(candidates.router)
    register_error_handlers(app)
    logger.info("Routing configured.")

    logger.info("Application created.")
    return app
