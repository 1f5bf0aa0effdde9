"""
Rate limit middleware: Redis sliding window per caller.
The key is a hash of the bearer token when one is sent, else the client host.
Without REDIS_URL nothing is limited; Redis errors let the request through.
"""
import hashlib
import time
import uuid
from typing import Callable, Optional

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from brazucas.config import get_settings
from brazucas.errors import AuthenticationError
from brazucas.logging_config import get_logger
from brazucas.services.auth_service import extract_bearer_token

logger = get_logger(__name__)

REDIS_KEY_PREFIX = "rl:"
WINDOW_SECONDS = 60
# Health probes are never limited.
EXEMPT_PATHS = frozenset({"/health", "/api/healthz", "/api/readyz"})


def rate_limit_key(request: Request) -> Optional[str]:
    try:
        token = extract_bearer_token(request.headers.get("Authorization"))
    except AuthenticationError:
        token = None
    if token:
        return "token:" + hashlib.sha256(token.encode("utf-8")).hexdigest()[:32]
    if request.client and request.client.host:
        return f"ip:{request.client.host}"
    return None


async def _check_sliding_window(redis_url: str, key: str, limit: int) -> bool:
    """
    ZADD now, drop entries older than the window, ZCARD.
    True when the request is within the limit.
    """
    from redis.asyncio import Redis

    now = time.time()
    rkey = REDIS_KEY_PREFIX + key
    try:
        client = Redis.from_url(redis_url, decode_responses=True)
        try:
            pipe = client.pipeline()
            pipe.zadd(rkey, {str(uuid.uuid4()): now})
            pipe.zremrangebyscore(rkey, "-inf", now - WINDOW_SECONDS)
            pipe.zcard(rkey)
            pipe.expire(rkey, WINDOW_SECONDS + 10)
            results = await pipe.execute()
            count = results[2] if len(results) > 2 else 0
            return count <= limit
        finally:
            await client.aclose()
    except Exception as e:
        logger.warning("rate_limit.redis_error", key=key, error=str(e))
        return True


class RateLimitMiddleware(BaseHTTPMiddleware):
    """RATE_LIMIT_PER_MIN requests per caller per minute; 429 in the API envelope."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        settings = get_settings()
        if not settings.redis_url or request.url.path in EXEMPT_PATHS:
            return await call_next(request)
        key = rate_limit_key(request)
        if not key:
            return await call_next(request)
        limit = settings.rate_limit_per_min
        allowed = await _check_sliding_window(settings.redis_url, key, limit)
        if not allowed:
            logger.info("rate_limit.exceeded", key=key, limit=limit)
            return JSONResponse(
                status_code=429,
                content={"success": False, "error": "Too many requests, please try again later"},
            )
        return await call_next(request)
