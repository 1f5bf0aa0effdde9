"""
Status history: append-only audit rows in content_status_history.
Written on create/edit/submit/approve/reject/delete; never used to derive status.
"""
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from brazucas.models import StatusHistoryEntry
from brazucas.services.status_service import ContentKind, status_of

EVENT_CREATED = "created"
EVENT_UPDATED = "updated"
EVENT_SUBMITTED = "submitted"
EVENT_APPROVED = "approved"
EVENT_REJECTED = "rejected"
EVENT_APPROVAL_RESET = "approval_reset"
EVENT_DELETED = "deleted"


async def record_status_change(
    db: AsyncSession,
    kind: ContentKind,
    item,
    event_type: str,
    changed_by: Optional[UUID] = None,
    reason: Optional[str] = None,
    metadata_: Optional[Dict[str, Any]] = None,
) -> StatusHistoryEntry:
    """Append one row with the item's status after the change."""
    ev = StatusHistoryEntry(
        content_type=kind.value,
        content_id=item.id,
        event_type=event_type,
        status_code=status_of(item).value,
        approved=item.approved,
        changed_by=changed_by,
        reason=reason,
        metadata_=metadata_ or {},
    )
    db.add(ev)
    await db.flush()
    return ev


async def list_entries(
    db: AsyncSession,
    kind: ContentKind,
    content_id: UUID,
    limit: int = 100,
) -> List[StatusHistoryEntry]:
    """History of one item, newest first."""
    q = (
        select(StatusHistoryEntry)
        .where(
            StatusHistoryEntry.content_type == kind.value,
            StatusHistoryEntry.content_id == content_id,
        )
        .order_by(StatusHistoryEntry.created_at.desc())
        .limit(limit)
    )
    r = await db.execute(q)
    return list(r.scalars().all())
