"""
News and ads CRUD. Both kinds share the approval columns, so every function
takes a ContentKind and works on the matching model.

Items are created with approved=None. Lists come back newest first. Permission
checks go through services.permissions; status through status_service.
"""
from typing import Any, Dict, Iterable, List, Optional, Type, Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from brazucas.config import get_settings
from brazucas.errors import NotFoundError, ValidationError
from brazucas.infrastructure.redis_cache import cache_nickname, get_cached_nickname
from brazucas.logging_config import get_logger
from brazucas.models import Advertisement, NewsPost, User
from brazucas.services import history_service
from brazucas.services.permissions import Action, Principal, ensure_permission
from brazucas.services.status_service import ContentKind, status_of
from brazucas.utils.clock import utcnow

logger = get_logger(__name__)

ContentModel = Union[NewsPost, Advertisement]

MODELS: Dict[ContentKind, Type] = {
    ContentKind.NEWS: NewsPost,
    ContentKind.ADS: Advertisement,
}

NOT_FOUND_MESSAGES = {
    ContentKind.NEWS: "News not found",
    ContentKind.ADS: "Advertisement not found",
}

# Optional columns a patch may clear with null; other None values are ignored.
CLEARABLE_FIELDS = frozenset({"image_url", "youtube_url"})
# Not content: changing only these never resets approval.
NON_CONTENT_FIELDS = frozenset({"published"})
PROTECTED_FIELDS = frozenset({"id", "author_id", "approved", "approved_at", "created_at", "updated_at"})


def model_for(kind: ContentKind) -> Type:
    return MODELS[kind]


async def get_content(db: AsyncSession, kind: ContentKind, content_id: UUID) -> ContentModel:
    """Item by id; NotFoundError when absent."""
    item = await db.get(model_for(kind), content_id)
    if item is None:
        raise NotFoundError(NOT_FOUND_MESSAGES[kind], code=f"{kind.value}_not_found")
    return item


async def create_content(
    db: AsyncSession,
    kind: ContentKind,
    author_id: UUID,
    data: Dict[str, Any],
) -> ContentModel:
    """Insert with approved=None; published defaults to False."""
    model = model_for(kind)
    fields = {k: v for k, v in data.items() if k not in PROTECTED_FIELDS}
    now = utcnow()
    item = model(
        **fields,
        author_id=author_id,
        approved=None,
        approved_at=None,
        created_at=now,
        updated_at=now,
    )
    if item.published is None:
        item.published = False
    db.add(item)
    await db.flush()
    await history_service.record_status_change(db, kind, item, history_service.EVENT_CREATED, changed_by=author_id)
    logger.info(
        "content.created",
        kind=kind.value,
        content_id=str(item.id),
        author_id=str(author_id),
        status=status_of(item).value,
    )
    return item


async def _list(db: AsyncSession, kind: ContentKind, *conditions) -> List[ContentModel]:
    model = model_for(kind)
    q = select(model).where(*conditions).order_by(model.created_at.desc())
    r = await db.execute(q)
    return list(r.scalars().all())


async def list_all(db: AsyncSession, kind: ContentKind) -> List[ContentModel]:
    return await _list(db, kind)


async def list_published(db: AsyncSession, kind: ContentKind) -> List[ContentModel]:
    """Status published: published and approved."""
    model = model_for(kind)
    return await _list(db, kind, model.published.is_(True), model.approved.is_(True))


async def list_pending(db: AsyncSession, kind: ContentKind, principal: Optional[Principal]) -> List[ContentModel]:
    """Status pending_approval (published, no decision yet). Admin only."""
    ensure_permission(principal, Action.VIEW_PENDING)
    model = model_for(kind)
    return await _list(db, kind, model.published.is_(True), model.approved.is_(None))


async def list_mine(db: AsyncSession, kind: ContentKind, author_id: UUID) -> List[ContentModel]:
    """Everything the author owns, whatever its status."""
    model = model_for(kind)
    return await _list(db, kind, model.author_id == author_id)


def _clean_patch(patch: Dict[str, Any]) -> Dict[str, Any]:
    cleaned = {}
    for key, value in patch.items():
        if key in PROTECTED_FIELDS:
            continue
        if value is None and key not in CLEARABLE_FIELDS:
            continue
        cleaned[key] = value
    return cleaned


def _should_reset_approval(item, principal: Principal, changed: Iterable[str]) -> bool:
    if principal.is_admin or item.approved is None:
        return False
    if not get_settings().reset_approval_on_edit:
        return False
    return any(field not in NON_CONTENT_FIELDS for field in changed)


async def update_content(
    db: AsyncSession,
    kind: ContentKind,
    content_id: UUID,
    patch: Dict[str, Any],
    principal: Principal,
) -> ContentModel:
    """
    Merge patch into the item (owner or admin).

    With RESET_APPROVAL_ON_EDIT, a non-admin change to content fields of an
    approved or rejected item clears approved/approved_at so it goes back to
    review. Toggling only published keeps the decision.
    """
    item = await get_content(db, kind, content_id)
    ensure_permission(principal, Action.EDIT, owner_id=item.author_id)
    cleaned = _clean_patch(patch)
    if not cleaned:
        raise ValidationError("No fields to update", code="empty_update")

    status_before = status_of(item)
    changed = []
    for key, value in cleaned.items():
        if not hasattr(item, key):
            continue
        if getattr(item, key) != value:
            setattr(item, key, value)
            changed.append(key)

    reset = _should_reset_approval(item, principal, changed)
    if reset:
        item.approved = None
        item.approved_at = None
    if changed:
        item.updated_at = utcnow()
    await db.flush()

    status_after = status_of(item)
    if reset:
        await history_service.record_status_change(
            db,
            kind,
            item,
            history_service.EVENT_APPROVAL_RESET,
            changed_by=principal.id,
            metadata_={"fields": sorted(changed), "previous_status": status_before.value},
        )
    elif status_after != status_before:
        await history_service.record_status_change(
            db,
            kind,
            item,
            history_service.EVENT_UPDATED,
            changed_by=principal.id,
            metadata_={"fields": sorted(changed), "previous_status": status_before.value},
        )
    logger.info(
        "content.updated",
        kind=kind.value,
        content_id=str(item.id),
        by=str(principal.id),
        fields=sorted(changed),
        approval_reset=reset,
        status=status_after.value,
    )
    return item


async def delete_content(
    db: AsyncSession,
    kind: ContentKind,
    content_id: UUID,
    principal: Principal,
) -> UUID:
    """Delete (owner or admin). Returns the deleted id."""
    item = await get_content(db, kind, content_id)
    ensure_permission(principal, Action.DELETE, owner_id=item.author_id)
    await history_service.record_status_change(db, kind, item, history_service.EVENT_DELETED, changed_by=principal.id)
    await db.delete(item)
    await db.flush()
    logger.info("content.deleted", kind=kind.value, content_id=str(content_id), by=str(principal.id))
    return content_id


async def author_nicknames(db: AsyncSession, items: Iterable[ContentModel]) -> Dict[UUID, str]:
    """
    author_id -> nickname for the given items. Redis first, then the users
    table. Never raises: on any failure, or for a vanished author, the
    UNKNOWN_AUTHOR_NICKNAME placeholder is used.
    """
    placeholder = get_settings().unknown_author_nickname
    author_ids = {item.author_id for item in items}
    result: Dict[UUID, str] = {}
    if not author_ids:
        return result
    try:
        missing = []
        for author_id in author_ids:
            cached = await get_cached_nickname(author_id)
            if cached:
                result[author_id] = cached
            else:
                missing.append(author_id)
        if missing:
            r = await db.execute(select(User.id, User.nickname).where(User.id.in_(missing)))
            for user_id, nickname in r.all():
                result[user_id] = nickname
                await cache_nickname(user_id, nickname)
    except Exception as e:
        logger.warning("content.nickname_lookup_failed", error=str(e))
    for author_id in author_ids:
        result.setdefault(author_id, placeholder)
    return result
