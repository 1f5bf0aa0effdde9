"""Admin dashboard counts: users plus news/ads per derived status."""
import time
from typing import Dict, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from brazucas.services import user_service
from brazucas.services.content_service import model_for
from brazucas.services.permissions import Action, Principal, ensure_permission
from brazucas.services.status_service import ContentKind, ContentStatus, derive_status


async def count_by_status(db: AsyncSession, kind: ContentKind) -> Dict[str, int]:
    """
    Counts keyed by status value plus "total". Grouped on the stored
    (published, approved) pairs and mapped through derive_status.
    """
    model = model_for(kind)
    r = await db.execute(
        select(model.published, model.approved, func.count(model.id)).group_by(model.published, model.approved)
    )
    counts = {s.value: 0 for s in ContentStatus}
    total = 0
    for published, approved, n in r.all():
        counts[derive_status(bool(published), approved).value] += n
        total += n
    counts["total"] = total
    return counts


async def admin_stats(db: AsyncSession, principal: Optional[Principal]) -> Dict:
    ensure_permission(principal, Action.VIEW_STATS)
    return {
        "users": await user_service.count_users(db),
        "news": await count_by_status(db, ContentKind.NEWS),
        "ads": await count_by_status(db, ContentKind.ADS),
        "timestamp": int(time.time() * 1000),
    }
