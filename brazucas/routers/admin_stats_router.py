"""API /api/admin-stats: dashboard counts (admin)."""
from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from brazucas.db import get_db
from brazucas.deps import get_current_principal
from brazucas.schemas.common import ApiResponse, ok
from brazucas.schemas.stats import AdminStatsOut
from brazucas.services import stats_service
from brazucas.services.permissions import Principal

router = APIRouter(prefix="/api", tags=["admin"])

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


@router.get("/admin-stats", response_model=ApiResponse[AdminStatsOut])
async def get_admin_stats(
    response: Response,
    principal: Principal = Depends(get_current_principal),
    db: AsyncSession = Depends(get_db),
):
    """Users and news/ads counts per status. Never cached."""
    stats = await stats_service.admin_stats(db, principal)
    response.headers.update(NO_CACHE_HEADERS)
    return ok(AdminStatsOut.model_validate(stats))
