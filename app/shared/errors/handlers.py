"""
Centralized error handlers for FastAPI.

Maps handler errors to HTTP responses:
    BadRequestError -> 400, message as plain-text body
    InternalError   -> 500, message as plain-text body
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from app.application.qa.errors import (
    DEFAULT_INTERNAL_ERROR_MESSAGE,
    BadRequestError,
    HandlerError,
    InternalError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500


def register_error_handlers(app: FastAPI) -> None:
    """Register all handler error mappings on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(BadRequestError)
    async def handle_bad_request(
        _request: Request, exc: BadRequestError
    ) -> PlainTextResponse:
        """Handle client-correctable errors."""
        logger.warning("Bad request: %s", exc.message)
        return PlainTextResponse(exc.message, status_code=HTTP_400)

    @app.exception_handler(InternalError)
    async def handle_internal(
        _request: Request, exc: InternalError
    ) -> PlainTextResponse:
        """Handle opaque failures. The cause was logged by the handler."""
        return PlainTextResponse(exc.message, status_code=HTTP_500)

    @app.exception_handler(HandlerError)
    async def handle_handler_error(
        _request: Request, exc: HandlerError
    ) -> PlainTextResponse:
        """Catch-all for handler errors without a dedicated mapping."""
        logger.error("Unmapped handler error: %r", exc)
        return PlainTextResponse(DEFAULT_INTERNAL_ERROR_MESSAGE, status_code=HTTP_500)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> PlainTextResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return PlainTextResponse(DEFAULT_INTERNAL_ERROR_MESSAGE, status_code=HTTP_500)
