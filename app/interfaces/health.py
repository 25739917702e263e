"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
"""

from fastapi import APIRouter, Request

from app.core.config import settings
from app.interfaces.schemas import STATUS_OK, HealthResponse, HttpResponse
from app.shared.security.rate_limiting import limiter

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HttpResponse,
    response_model_exclude_none=True,
    summary="Health check",
    description="Returns application health status and version.",
)
@limiter.limit(settings.rate_limit_default)
def health_check(request: Request) -> HttpResponse:
    """Return current application health status."""
    return HttpResponse(
        code=STATUS_OK,
        message="ok",
        data=HealthResponse(status="ok", version=settings.version).model_dump(),
    )
