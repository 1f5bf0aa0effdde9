"""
Redis cache for author nicknames shown next to news/ads.
Without REDIS_URL every call is a no-op (get returns None); Redis errors are
logged and treated as a miss so enrichment never fails a request.
"""
import uuid
from typing import Optional

from brazucas.config import get_settings
from brazucas.logging_config import get_logger

logger = get_logger(__name__)

NICKNAME_PREFIX = "nickname:"


def _key(user_id: uuid.UUID) -> str:
    return f"{NICKNAME_PREFIX}{user_id}"


async def get_cached_nickname(user_id: uuid.UUID) -> Optional[str]:
    """Nickname from cache, or None when missing / no Redis."""
    settings = get_settings()
    if not settings.redis_url:
        return None
    try:
        from redis.asyncio import Redis
        client = Redis.from_url(settings.redis_url, decode_responses=True)
        try:
            return await client.get(_key(user_id))
        finally:
            await client.aclose()
    except Exception as e:
        logger.warning("nickname_cache.get_error", user_id=str(user_id), error=str(e))
        return None


async def cache_nickname(user_id: uuid.UUID, nickname: str) -> bool:
    """Store nickname with NICKNAME_CACHE_TTL_SECONDS. False when skipped or failed."""
    settings = get_settings()
    if not settings.redis_url:
        return False
    try:
        from redis.asyncio import Redis
        client = Redis.from_url(settings.redis_url, decode_responses=True)
        try:
            await client.setex(_key(user_id), settings.nickname_cache_ttl_seconds, nickname)
            return True
        finally:
            await client.aclose()
    except Exception as e:
        logger.warning("nickname_cache.set_error", user_id=str(user_id), error=str(e))
        return False

