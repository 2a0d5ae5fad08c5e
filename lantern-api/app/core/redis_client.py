"""Process-wide Redis connection, opened and closed by the app lifespan."""
import logging
from typing import Optional

import redis.asyncio as redis

from app.core.config import settings

logger = logging.getLogger("lantern.redis")

redis_client: Optional[redis.Redis] = None


def _redacted(url: str) -> str:
    # Drop credentials before logging
    return url.rsplit("@", 1)[-1]


async def get_redis() -> redis.Redis:
    """Return the shared client, creating it on first use."""
    global redis_client
    if redis_client is None:
        logger.info("Connecting to Redis at %s", _redacted(settings.redis_url))
        redis_client = redis.from_url(
            settings.redis_url,
            encoding="utf-8",
            decode_responses=True,
            health_check_interval=30,
        )
    return redis_client


async def close_redis() -> None:
    """Release the shared client's connections."""
    global redis_client
    if redis_client is not None:
        await redis_client.aclose()
        redis_client = None
        logger.info("Redis connection closed")
