"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client limit on every route.
The limit and its on/off switch come from Settings.
"""

import logging

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from app.core.config import Settings

logger = logging.getLogger(__name__)

RATE_LIMITED_MESSAGE = "Too many requests! Please slow down."


def build_limiter(settings: Settings) -> Limiter:
    """Create the application's limiter from settings.

    Args:
        settings: Application settings carrying the default limit.

    Returns:
        A limiter applying ``settings.rate_limit_default`` per client address.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> PlainTextResponse:
    """Render an exceeded limit like the other client errors: plain text.

    Synchronous because SlowAPIMiddleware calls it without awaiting.
    The limit that was hit is logged, not returned.
    """
    logger.warning("Rate limit exceeded: %s", exc.detail)
    return PlainTextResponse(RATE_LIMITED_MESSAGE, status_code=429)
