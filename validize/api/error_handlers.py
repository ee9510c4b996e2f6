"""Error Handlers: app-level exception handlers for failures raised outside a Dispatcher.

Invariants:
    - ValidizeError → its http_status, empty body, logged at its severity
    - Exception (catch-all) → 500, empty body, never leaks internal details
    - Same empty-body contract as Dispatcher results

Design Decisions:
    - Two-layer handler: domain (ValidizeError), catch-all (Exception)
    - Lets plain FastAPI routes raise NotFoundError/ValidationFailedError directly
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import Response

from validize.core.errors import ValidizeError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validize_error_handler(app)
    _register_generic_error_handler(app)


def _register_validize_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ValidizeError)
    async def validize_error_handler(request: Request, exc: ValidizeError):
        """Handle all Validize validation/processing errors."""
        logger.log(
            exc.severity.log_level,
            f"ValidizeError: {exc}",
            extra={**exc.to_log_extra(), "path": request.url.path},
        )
        return Response(status_code=exc.http_status)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"path": request.url.path, "status_code": 500},
            exc_info=exc,
        )
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
