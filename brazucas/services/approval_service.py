"""
Approval workflow for news and ads.
- submit_for_review: author (or admin) marks the item published; approval stays as is.
- approve_content / reject_content: admin decision, sets approved + approved_at.
- list_status_history: audit rows of one item.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from brazucas.logging_config import get_logger
from brazucas.models import StatusHistoryEntry
from brazucas.services import content_service, history_service
from brazucas.services.content_service import ContentModel
from brazucas.services.permissions import Action, Principal, ensure_permission
from brazucas.services.status_service import ContentKind, status_of
from brazucas.utils.clock import utcnow

logger = get_logger(__name__)


async def submit_for_review(
    db: AsyncSession,
    kind: ContentKind,
    content_id: UUID,
    principal: Principal,
) -> ContentModel:
    """
    Set published=True (no-op when already set). approved is left untouched:
    a new item becomes pending_approval, a reset one goes back to the queue.
    """
    item = await content_service.get_content(db, kind, content_id)
    ensure_permission(principal, Action.SUBMIT, owner_id=item.author_id)
    if item.published:
        return item

    item.published = True
    item.updated_at = utcnow()
    await db.flush()

    await history_service.record_status_change(
        db, kind, item, history_service.EVENT_SUBMITTED, changed_by=principal.id
    )
    logger.info("approval.submitted", kind=kind.value, content_id=str(content_id), by=str(principal.id))
    return item


async def set_approval(
    db: AsyncSession,
    kind: ContentKind,
    content_id: UUID,
    approved: bool,
    principal: Optional[Principal],
    reason: Optional[str] = None,
) -> ContentModel:
    """
    Record an admin decision. Re-approving or re-rejecting is allowed and
    refreshes approved_at. Concurrent decisions: last write wins.
    """
    ensure_permission(principal, Action.REVIEW)
    item = await content_service.get_content(db, kind, content_id)

    now = utcnow()
    item.approved = approved
    item.approved_at = now
    item.updated_at = now
    await db.flush()

    event_type = history_service.EVENT_APPROVED if approved else history_service.EVENT_REJECTED
    await history_service.record_status_change(
        db,
        kind,
        item,
        event_type,
        changed_by=principal.id,
        reason=reason,
        metadata_={"approved_at": now.isoformat()},
    )
    logger.info(
        f"approval.{event_type}",
        kind=kind.value,
        content_id=str(content_id),
        by=str(principal.id),
        status=status_of(item).value,
    )
    return item


async def approve_content(
    db: AsyncSession,
    kind: ContentKind,
    content_id: UUID,
    principal: Optional[Principal],
) -> ContentModel:
    """approved=True. Status becomes published if the item is published, else draft."""
    return await set_approval(db, kind, content_id, True, principal)


async def reject_content(
    db: AsyncSession,
    kind: ContentKind,
    content_id: UUID,
    principal: Optional[Principal],
    reason: Optional[str] = None,
) -> ContentModel:
    """approved=False. Status becomes rejected whatever published says."""
    return await set_approval(db, kind, content_id, False, principal, reason=reason)


async def list_status_history(
    db: AsyncSession,
    kind: ContentKind,
    content_id: UUID,
    principal: Principal,
    limit: int = 100,
) -> List[StatusHistoryEntry]:
    """
    Audit rows of one item, newest first (owner or admin). For a deleted item
    only admins can read what is left.
    """
    item = await db.get(content_service.model_for(kind), content_id)
    owner_id = item.author_id if item is not None else None
    ensure_permission(principal, Action.VIEW_HISTORY, owner_id=owner_id)
    return await history_service.list_entries(db, kind, content_id, limit=limit)
