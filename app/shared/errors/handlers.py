"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses through a fixed
variant-to-status table. No stack traces or internal details are
exposed to clients. All error responses share the body shape
``{"error": {"message": str, "status": int}}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from app.domain.blogging.errors import (
    BloggingDomainError,
    ConflictError,
    NotFoundError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500

INTERNAL_ERROR_MESSAGE = "Internal Server Error"

# Most specific first; the first isinstance match wins.
STATUS_BY_ERROR: tuple[tuple[type[BloggingDomainError], int], ...] = (
    (ValidationError, HTTP_400),
    (NotFoundError, HTTP_404),
    (ConflictError, HTTP_409),
    (StoreError, HTTP_500),
)


def status_for(exc: BloggingDomainError) -> int:
    """Return the HTTP status code for a domain error."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return HTTP_500


def _error_response(status_code: int, message: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "status": status_code}},
    )


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turns unexpected exceptions into the generic 500 response.

    Installed innermost, so the response still passes through the security
    headers and request logging middleware. The catch-all handler below only
    sees errors raised by those outer layers.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(
                "Unexpected %s on %s %s",
                type(exc).__name__,
                request.method,
                request.url.path,
            )
            return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(BloggingDomainError)
    async def handle_domain_error(
        request: Request, exc: BloggingDomainError
    ) -> JSONResponse:
        """Translate any blogging domain error through the status table."""
        status_code = status_for(exc)
        if status_code >= HTTP_500:
            logger.error(
                "%s on %s %s: %s",
                type(exc).__name__,
                request.method,
                request.url.path,
                exc.message,
            )
            return _error_response(status_code, INTERNAL_ERROR_MESSAGE)

        logger.warning(
            "%s on %s %s: %s",
            type(exc).__name__,
            request.method,
            request.url.path,
            exc.message,
        )
        return _error_response(status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed JSON or wrongly typed fields are client errors."""
        logger.warning("Request validation failed: %d error(s)", len(exc.errors()))
        return _error_response(HTTP_400, "Invalid request body")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Keep framework errors (unknown route, bad method) in the same shape."""
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)
