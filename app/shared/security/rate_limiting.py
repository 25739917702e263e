"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-endpoint rate limits. Rejected requests
get the same HttpResponse envelope as every other error.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import settings
from app.interfaces.schemas import STATUS_TOO_MANY_REQUESTS, HttpResponse

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit_default])


async def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 envelope naming the limit that was hit.
    """
    response = HttpResponse(
        code=STATUS_TOO_MANY_REQUESTS, message=f"Rate limit exceeded: {exc.detail}"
    )
    return JSONResponse(status_code=STATUS_TOO_MANY_REQUESTS, content=response.to_content())
