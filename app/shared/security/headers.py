"""
Secure HTTP headers middleware.

Adds security-related headers to every response and makes sure each
request carries a correlation id, echoed back as ``X-Request-ID``.
Unexpected errors are turned into the 500 MessageError response here,
so that response carries the same headers.

No business logic. Pure cross-cutting concern.
"""

import logging
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.shared.errors.handlers import HTTP_500, error_response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that tags requests with an id and hardens responses.

    The id is taken from the inbound ``X-Request-ID`` header when present,
    otherwise generated, and stored on ``request.state.request_id``.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Assign the request id, then add headers to the response."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        request.state.request_id = request_id
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception(
                "Unexpected error: %s request_id=%s", type(exc).__name__, request_id
            )
            response = error_response(HTTP_500, "Internal server error")
        for header_name, header_value in SECURE_HEADERS.items():
            response.headers[header_name] = header_value
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
