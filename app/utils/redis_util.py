import logging
from typing import Optional
import redis.asyncio as aioredis
from redis.exceptions import RedisError
from app.config import Settings

logger = logging.getLogger(__name__)


class CacheUnavailableError(Exception):
    """Redis could not be reached."""


class CacheClient:
    """
    Thin async wrapper around Redis for string values with expiration.
    Request-time failures are logged and reported as a miss / failed write
    so callers can carry on without the cache.
    """

    def __init__(self, redis: aioredis.Redis):
        self.redis = redis

    @classmethod
    def from_settings(cls, settings: Settings) -> "CacheClient":
        redis = aioredis.Redis(
            host=settings.REDIS_HOST,
            port=settings.REDIS_PORT,
            password=settings.REDIS_PASSWORD or None,
            decode_responses=True,
            socket_connect_timeout=2,
            socket_timeout=2,
        )
        return cls(redis)

    async def ping(self):
        try:
            await self.redis.ping()
        except (RedisError, OSError) as e:
            raise CacheUnavailableError(f"can not connect redis: {e}") from e

    async def get(self, key: str) -> Optional[str]:
        try:
            return await self.redis.get(key)
        except RedisError as e:
            logger.warning(f"Cache get error for key {key}: {e}")
            return None

    async def set(self, key: str, value: str, ttl: int) -> bool:
        try:
            await self.redis.set(key, value, ex=ttl)
            return True
        except RedisError as e:
            logger.warning(f"Cache set error for key {key}: {e}")
            return False

    async def close(self):
        await self.redis.aclose()
