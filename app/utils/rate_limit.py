"""Per-client-IP rate limiting using slowapi with a sliding (moving) window."""

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from app.config import Settings

TOO_MANY_REQUESTS_MESSAGE = "Too many requests please try again later"


def build_limiter(settings: Settings) -> Limiter:
    return Limiter(
        key_func=get_remote_address,
        strategy="moving-window",
        storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    return JSONResponse(
        status_code=429,
        content={"message": TOO_MANY_REQUESTS_MESSAGE},
    )
