"""Redis client factory — the cache in front of the product/customer tables.

One client (with its own connection pool) per process, created in the app
lifespan and injected into RecordCache.
"""

import logging

import redis.asyncio as aioredis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


def create_redis(redis_url: str) -> aioredis.Redis:
    """Create the client. rediss:// URLs enable TLS."""
    return aioredis.from_url(redis_url, decode_responses=True)


async def check_redis_connection(redis: aioredis.Redis) -> bool:
    """Ping once at startup. An unreachable cache is logged, not fatal."""
    try:
        await redis.ping()
    except RedisError as exc:
        logger.error("Redis connection error: %s", exc)
        return False
    logger.info("Connected to Redis successfully")
    return True


async def close_redis(redis: aioredis.Redis) -> None:
    await redis.aclose()
