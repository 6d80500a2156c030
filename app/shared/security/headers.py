"""
Secure HTTP headers middleware.

Adds security-related headers to every response. The API documentation
pages load Swagger UI assets from a CDN, so they get a wider
Content-Security-Policy than the JSON endpoints.

No business logic. Pure cross-cutting concern.
"""

from collections.abc import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

API_CSP = "default-src 'none'; frame-ancestors 'none'"
DOCS_CSP = (
    "default-src 'self'; "
    "script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
    "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
    "img-src 'self' data: https://fastapi.tiangolo.com"
)

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds secure HTTP headers to every response.

    Args:
        app: The wrapped ASGI application.
        docs_paths: Path prefixes served with the documentation CSP.
    """

    def __init__(self, app: ASGIApp, docs_paths: Iterable[str] = ()) -> None:
        super().__init__(app)
        self._docs_paths = tuple(path for path in docs_paths if path)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process request and add security headers to response."""
        response = await call_next(request)
        for header_name, header_value in SECURE_HEADERS.items():
            response.headers[header_name] = header_value
        response.headers["Content-Security-Policy"] = self._csp_for(request.url.path)
        return response

    def _csp_for(self, path: str) -> str:
        if self._docs_paths and path.startswith(self._docs_paths):
            return DOCS_CSP
        return API_CSP
