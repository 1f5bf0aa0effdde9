"""Service categories used by ads. Reads are public; writes are admin only."""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from brazucas.errors import ConflictError, NotFoundError
from brazucas.logging_config import get_logger
from brazucas.models import ServiceCategory
from brazucas.services.permissions import Action, Principal, ensure_permission
from brazucas.utils.clock import utcnow

logger = get_logger(__name__)


async def _find_by_name(db: AsyncSession, name: str) -> Optional[ServiceCategory]:
    r = await db.execute(
        select(ServiceCategory).where(func.lower(ServiceCategory.name) == name.strip().lower())
    )
    return r.scalar_one_or_none()


async def list_categories(db: AsyncSession, active_only: bool = False) -> List[ServiceCategory]:
    """Sorted by name."""
    q = select(ServiceCategory).order_by(ServiceCategory.name)
    if active_only:
        q = q.where(ServiceCategory.active.is_(True))
    r = await db.execute(q)
    return list(r.scalars().all())


async def get_category(db: AsyncSession, category_id: UUID) -> ServiceCategory:
    category = await db.get(ServiceCategory, category_id)
    if category is None:
        raise NotFoundError("Service category not found", code="category_not_found")
    return category


async def create_category(
    db: AsyncSession,
    name: str,
    principal: Optional[Principal],
    active: bool = True,
) -> ServiceCategory:
    ensure_permission(principal, Action.MANAGE_CATEGORIES)
    if await _find_by_name(db, name):
        raise ConflictError("Service category already exists", code="category_exists")
    now = utcnow()
    category = ServiceCategory(name=name.strip(), active=active, created_at=now, updated_at=now)
    db.add(category)
    await db.flush()
    logger.info("category.created", category_id=str(category.id), name=category.name)
    return category


async def update_category(
    db: AsyncSession,
    category_id: UUID,
    principal: Optional[Principal],
    name: Optional[str] = None,
    active: Optional[bool] = None,
) -> ServiceCategory:
    """Rename and/or toggle; ConflictError when another category has the name."""
    ensure_permission(principal, Action.MANAGE_CATEGORIES)
    category = await get_category(db, category_id)
    if name is not None:
        other = await _find_by_name(db, name)
        if other is not None and other.id != category.id:
            raise ConflictError("Service category already exists", code="category_exists")
        category.name = name.strip()
    if active is not None:
        category.active = active
    category.updated_at = utcnow()
    await db.flush()
    logger.info("category.updated", category_id=str(category.id), name=category.name, active=category.active)
    return category


async def delete_category(db: AsyncSession, category_id: UUID, principal: Optional[Principal]) -> UUID:
    ensure_permission(principal, Action.MANAGE_CATEGORIES)
    category = await get_category(db, category_id)
    await db.delete(category)
    await db.flush()
    logger.info("category.deleted", category_id=str(category_id))
    return category_id
