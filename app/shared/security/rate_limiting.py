"""
Rate limiting configuration and setup.

Uses slowapi to apply the configured limit to every endpoint, keyed by
client address. Routes opt in with ``@limiter.limit(current_rate_limit)``;
the limit string is read from settings on each request.
Breaches answer 429 in the MessageError envelope.
"""

import logging

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import settings

logger = logging.getLogger(__name__)

HTTP_429 = 429

limiter = Limiter(key_func=get_remote_address)


def current_rate_limit() -> str:
    """Return the configured per-client limit, e.g. ``"60/minute"``."""
    return settings.rate_limit_default


def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a MessageError response.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response naming the breached limit.
    """
    logger.warning("Rate limit exceeded for %s", get_remote_address(request))
    return JSONResponse(
        status_code=HTTP_429,
        content={"message": f"Rate limit exceeded: {exc.detail}"},
    )
