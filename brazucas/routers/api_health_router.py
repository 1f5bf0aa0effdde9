# /api/healthz (liveness) and /api/readyz (readiness: DB, plus Redis when configured).
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from brazucas.config import get_settings
from brazucas.db import get_db
from brazucas.logging_config import get_logger

router = APIRouter(prefix="/api", tags=["health"])
logger = get_logger(__name__)


@router.get("/healthz")
def healthz() -> dict[str, str]:
    """Process is up. Always 200."""
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(db: AsyncSession = Depends(get_db)):
    """503 when the database (or Redis, if REDIS_URL is set) does not answer."""
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("readyz.db_fail", error=str(e))
        return JSONResponse(status_code=503, content={"status": "unhealthy", "db": "fail"})

    settings = get_settings()
    redis_state = "disabled"
    if settings.redis_url:
        try:
            from redis.asyncio import Redis
            client = Redis.from_url(settings.redis_url, decode_responses=True)
            try:
                await client.ping()
            finally:
                await client.aclose()
            redis_state = "ok"
        except Exception as e:
            logger.warning("readyz.redis_fail", error=str(e))
            return JSONResponse(status_code=503, content={"status": "unhealthy", "db": "ok", "redis": "fail"})

    return {"status": "ok", "db": "ok", "redis": redis_state}
