"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (users, blogs, comments, health)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Request logging
- Document store lifecycle (opened on startup, closed on shutdown)

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import settings
from app.infrastructure.blogging.mongo_store import MongoStore
from app.interfaces.blogging.blogs import router as blogs_router
from app.interfaces.blogging.comments import router as comments_router
from app.interfaces.blogging.users import router as users_router
from app.interfaces.health import router as health_router
from app.shared.errors import UnhandledErrorMiddleware, register_error_handlers
from app.shared.logging import RequestLoggingMiddleware, configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)

DOCS_URL = "/api-docs"
REDOC_URL = "/redoc"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the document store, close it on shutdown."""
    store = MongoStore(
        uri=settings.mongo_uri,
        database=settings.mongo_db,
        timeout_ms=settings.mongo_timeout_ms,
    )
    store.open()
    app.state.store = store
    logger.info("%s %s started", settings.project_name, settings.version)
    try:
        yield
    finally:
        store.close()
        app.state.store = None


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        description="API for managing blogs, comments, and users",
        docs_url=DOCS_URL if settings.docs_enabled else None,
        redoc_url=REDOC_URL if settings.docs_enabled else None,
        lifespan=lifespan,
    )

    # --- Unexpected Errors (innermost) ---
    app.add_middleware(UnhandledErrorMiddleware)

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    docs_paths = (DOCS_URL, REDOC_URL, "/openapi.json") if settings.docs_enabled else ()
    app.add_middleware(SecurityHeadersMiddleware, docs_paths=docs_paths)

    # --- Request Logging (outermost) ---
    app.add_middleware(RequestLoggingMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(users_router, prefix=settings.api_prefix)
    app.include_router(blogs_router, prefix=settings.api_prefix)
    app.include_router(comments_router, prefix=settings.api_prefix)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured address."""
    import uvicorn

    logger.info(
        "Serving on http://%s:%d (docs at %s)", settings.host, settings.port, DOCS_URL
    )
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
