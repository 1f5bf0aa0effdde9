"""API /api/status-system: status catalog, per-context lists, item history."""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from brazucas.db import get_db
from brazucas.deps import get_current_principal
from brazucas.schemas.common import ApiResponse, ok
from brazucas.schemas.content import StatusHistoryOut
from brazucas.schemas.status import ContextualStatusOut, StatusSystemOut
from brazucas.services import approval_service
from brazucas.services.permissions import Principal
from brazucas.services.status_service import ContentKind, StatusContext, contextual_statuses, status_catalog

router = APIRouter(prefix="/api/status-system", tags=["status"])


@router.get("", response_model=ApiResponse[StatusSystemOut])
async def get_status_system():
    """Content types, contexts and the four statuses with labels/colors."""
    return ok(StatusSystemOut.model_validate(status_catalog()))


@router.get("/contextual", response_model=ApiResponse[ContextualStatusOut])
async def get_contextual_statuses(
    content_type: ContentKind = Query(..., alias="contentType"),
    context: StatusContext = Query(StatusContext.MANAGEMENT),
):
    return ok(ContextualStatusOut.model_validate(contextual_statuses(content_type, context)))


@router.get("/history", response_model=ApiResponse[List[StatusHistoryOut]])
async def get_status_history(
    content_type: ContentKind = Query(..., alias="contentType"),
    content_id: UUID = Query(..., alias="contentId"),
    principal: Principal = Depends(get_current_principal),
    db: AsyncSession = Depends(get_db),
):
    """Audit trail of one item, newest first (owner or admin)."""
    entries = await approval_service.list_status_history(db, content_type, content_id, principal)
    return ok(
        [
            StatusHistoryOut(
                id=ev.id,
                content_type=ev.content_type,
                content_id=ev.content_id,
                event_type=ev.event_type,
                status_code=ev.status_code,
                approved=ev.approved,
                changed_by=ev.changed_by,
                reason=ev.reason,
                metadata=ev.metadata_,
                created_at=ev.created_at,
            )
            for ev in entries
        ]
    )
