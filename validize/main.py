"""Validize API: FastAPI application factory.

Invariants:
    - Routers registered explicitly (no auto-discovery)
    - Settings read once (get_settings is cached) and passed down; trace reaches
      dispatchers as a constructor argument
    - Global error handlers keep the empty-body contract for non-dispatcher routes

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - create_app(settings) factory: tests build apps with explicit settings
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from validize.api import example_routes, health
from validize.api.error_handlers import register_error_handlers
from validize.config import Settings, get_settings
from validize.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI app with example routes and error handlers."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(f"Validize API started (trace={settings.trace})")
        yield
        logger.info("Validize API shutting down")

    app = FastAPI(title="Validize API", version="1.0.0", lifespan=lifespan)

    app.include_router(health.router)
    app.include_router(example_routes.build_router(trace=settings.trace))

    register_error_handlers(app)
    return app


app = create_app()
