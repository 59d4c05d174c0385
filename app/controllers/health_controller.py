import logging
from datetime import datetime, timezone
from app.context import AppContext
from app.utils.redis_util import CacheUnavailableError

logger = logging.getLogger(__name__)

async def health_check(ctx: AppContext):
    try:
        await ctx.cache.ping()
        cache_status = "connected"
    except CacheUnavailableError as e:
        logger.warning(f"Health check: {e}")
        cache_status = "disconnected"

    return {
        "status": "ok" if cache_status == "connected" else "degraded",
        "cache": cache_status,
        "time": datetime.now(timezone.utc).isoformat(),
    }
