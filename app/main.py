import logging
import logging.config
from contextlib import asynccontextmanager
from typing import Optional
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from app.config import Settings
from app.context import AppContext
from app.logging_config import build_logging_config
from app.routes import health_router, build_bmi_router
from app.services.bmi_service import BMIService
from app.utils.rate_limit import build_limiter, rate_limit_exceeded_handler
from app.utils.redis_util import CacheClient, CacheUnavailableError

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ["GET", "POST", "HEAD", "PUT", "DELETE", "PATCH"]
ALLOWED_HEADERS = ["Content-Type", "Authorization"]


def build_lifespan(settings: Settings, cache: CacheClient):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            await cache.ping()
            logger.info("Connected to Redis")
        except CacheUnavailableError as e:
            if settings.CACHE_REQUIRED:
                logger.error(f"{e}. Set CACHE_REQUIRED=false to start without the cache.")
                raise
            logger.warning(f"{e}. Starting without cache, every request will be computed.")

        yield

        try:
            await cache.close()
            logger.info("Redis connection closed")
        except Exception as e:
            logger.error(f"Error closing Redis connection: {e}")

    return lifespan


def create_app(settings: Optional[Settings] = None, cache: Optional[CacheClient] = None) -> FastAPI:
    if settings is None:
        settings = Settings.from_env()
    if cache is None:
        cache = CacheClient.from_settings(settings)

    app = FastAPI(
        title="BMI API",
        description="Computes Body Mass Index from weight and height, with Redis caching and per-IP rate limiting.",
        version="1.0.0",
        lifespan=build_lifespan(settings, cache),
        openapi_tags=[
            {"name": "BMI", "description": "Body Mass Index calculation"},
            {"name": "Health", "description": "Check cache connection and service health"},
        ],
    )

    app.state.context = AppContext(
        settings=settings,
        cache=cache,
        bmi_service=BMIService(cache, ttl=settings.BMI_CACHE_TTL),
    )

    # POST /bmi checks the limit itself, see routes/bmi.py
    limiter = build_limiter(settings)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # Middleware added last runs first: CORS -> method logging
    @app.middleware("http")
    async def log_http_method(request: Request, call_next):
        logger.info(f"HTTP method used: {request.method} {request.url.path}")
        return await call_next(request)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
    )

    app.include_router(health_router)
    app.include_router(build_bmi_router(limiter, settings.rate_limit_expression))

    return app


def run():
    settings = Settings.from_env()
    logging_config = build_logging_config()
    logging.config.dictConfig(logging_config)
    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        log_config=logging_config,
    )


if __name__ == "__main__":
    run()
