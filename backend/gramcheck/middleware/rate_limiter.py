"""Per-client rate limiting using slowapi."""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from gramcheck.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

# Convenience limit string built from config
CHECK_LIMIT = f"{settings.rate_limit_check}/minute"


def rate_limit_exceeded_handler(_request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Return the JSON error body when the rate limit is exceeded."""
    return JSONResponse(
        status_code=429,
        content={"error": "Too many requests, please try again later."},
    )
