"""
Centralized error handlers for FastAPI.

Maps payload errors and product domain errors to HTTP responses.
Every error response uses the MessageError envelope.
No stack traces or internal details are exposed to clients.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.products.errors import ErrorKind, ProductDomainError
from app.interfaces.products.validation import (
    PayloadDecodeError,
    PayloadValidationError,
    RequestTooLargeError,
)

logger = logging.getLogger(__name__)

HTTP_200 = 200
HTTP_400 = 400
HTTP_401 = 401
HTTP_404 = 404
HTTP_413 = 413
HTTP_500 = 500

# Conflicts answer 200, not 409.
STATUS_BY_KIND = {
    ErrorKind.AUTH_FAILED: HTTP_401,
    ErrorKind.EXPIRED_TOKEN: HTTP_401,
    ErrorKind.BAD_PARAM_INPUT: HTTP_400,
    ErrorKind.CONFLICT: HTTP_200,
    ErrorKind.NOT_FOUND: HTTP_404,
}


def get_response_status(error: Optional[BaseException]) -> int:
    """Infer the HTTP status for an outcome reported by the product service.

    Args:
        error: The raised error, or None for success.

    Returns:
        The HTTP status code. Anything unrecognized maps to 500.
    """
    if error is None:
        return HTTP_200
    if not isinstance(error, ProductDomainError):
        return HTTP_500
    return STATUS_BY_KIND.get(error.kind, HTTP_500)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSON error response in the MessageError envelope."""
    return JSONResponse(status_code=status_code, content={"message": message})


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(PayloadDecodeError)
    async def handle_decode_error(
        _request: Request, exc: PayloadDecodeError
    ) -> JSONResponse:
        """Handle bodies that are not a JSON object."""
        logger.info("Malformed request body: %s", exc.message)
        return error_response(HTTP_400, exc.message)

    @app.exception_handler(PayloadValidationError)
    async def handle_validation_error(
        _request: Request, exc: PayloadValidationError
    ) -> JSONResponse:
        """Handle bodies that break a field rule."""
        return error_response(HTTP_400, exc.message)

    @app.exception_handler(RequestTooLargeError)
    async def handle_request_too_large(
        _request: Request, exc: RequestTooLargeError
    ) -> JSONResponse:
        """Handle bodies over the configured size limit."""
        logger.warning("Request body too large: %d bytes", exc.size)
        return error_response(HTTP_413, exc.message)

    @app.exception_handler(ProductDomainError)
    async def handle_product_domain(
        _request: Request, exc: ProductDomainError
    ) -> JSONResponse:
        """Translate a service-reported failure through the status table."""
        return error_response(get_response_status(exc), exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(get_response_status(exc), "Internal server error")
