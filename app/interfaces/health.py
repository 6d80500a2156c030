"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status, version and whether
the document store answers.
"""

from fastapi import APIRouter, Request

from app.core.config import settings
from app.interfaces.blogging.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and store reachability.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    store = getattr(request.app.state, "store", None)
    database = "up" if store is not None and store.ping() else "down"
    return HealthResponse(status="ok", version=settings.version, database=database)
