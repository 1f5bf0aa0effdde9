"""
Router factory for /api/news and /api/ads. Both kinds expose the same verbs:

GET     ?id= | ?published=true | ?pending=true (admin) | ?my=true (auth) | all
POST    create (auth), 201
PUT     update, id in body (owner or admin)
PATCH   {id, approved, reason?} approve/reject (admin)
DELETE  ?id= (owner or admin)
POST    /{id}/submit  publish for review (owner or admin)
"""
from typing import Dict, List, Optional, Type, Union
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from brazucas.db import get_db
from brazucas.deps import get_current_principal, get_optional_principal
from brazucas.errors import AuthenticationError
from brazucas.schemas.common import ApiResponse, CamelModel, ErrorResponse, ok
from brazucas.schemas.content import ApprovalRequest, ContentDeleted, ContentOut
from brazucas.services import approval_service, content_service
from brazucas.services.permissions import Principal
from brazucas.services.status_service import ContentKind
from brazucas.utils.query_params import ensure_bool_query

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


def build_content_router(
    kind: ContentKind,
    prefix: str,
    create_schema: Type[CamelModel],
    update_schema: Type[CamelModel],
    out_schema: Type[ContentOut],
    messages: Dict[str, str],
) -> APIRouter:
    """One APIRouter per content kind; messages holds the per-kind envelope texts."""
    router = APIRouter(prefix=prefix, tags=[kind.value], responses=ERROR_RESPONSES)

    async def present(db: AsyncSession, items: list) -> list:
        nicknames = await content_service.author_nicknames(db, items)
        return [out_schema.from_item(item, nicknames.get(item.author_id)) for item in items]

    @router.get("", response_model=ApiResponse[Union[out_schema, List[out_schema]]])
    async def list_or_get(
        id: Optional[UUID] = Query(None, description="Return a single item"),
        published: Optional[str] = Query(None, description="true: only published items"),
        pending: Optional[str] = Query(None, description="true: items awaiting approval (admin)"),
        my: Optional[str] = Query(None, description="true: the caller's own items"),
        principal: Optional[Principal] = Depends(get_optional_principal),
        db: AsyncSession = Depends(get_db),
    ):
        if id is not None:
            item = await content_service.get_content(db, kind, id)
            return ok((await present(db, [item]))[0])
        if ensure_bool_query(pending):
            items = await content_service.list_pending(db, kind, principal)
        elif ensure_bool_query(my):
            if principal is None:
                raise AuthenticationError("Authorization header is required", code="missing_token")
            items = await content_service.list_mine(db, kind, principal.id)
        elif ensure_bool_query(published):
            items = await content_service.list_published(db, kind)
        else:
            items = await content_service.list_all(db, kind)
        return ok(await present(db, items))

    @router.post("", response_model=ApiResponse[out_schema], status_code=status.HTTP_201_CREATED)
    async def create(
        payload: create_schema,
        principal: Principal = Depends(get_current_principal),
        db: AsyncSession = Depends(get_db),
    ):
        item = await content_service.create_content(db, kind, principal.id, payload.model_dump(mode="json"))
        return ok((await present(db, [item]))[0], message=messages["created"])

    @router.put("", response_model=ApiResponse[out_schema])
    async def update(
        payload: update_schema,
        principal: Principal = Depends(get_current_principal),
        db: AsyncSession = Depends(get_db),
    ):
        patch = payload.model_dump(mode="json", exclude_unset=True, exclude={"id"})
        item = await content_service.update_content(db, kind, payload.id, patch, principal)
        return ok((await present(db, [item]))[0], message=messages["updated"])

    @router.patch("", response_model=ApiResponse[out_schema])
    async def review(
        payload: ApprovalRequest,
        principal: Principal = Depends(get_current_principal),
        db: AsyncSession = Depends(get_db),
    ):
        """Admin decision: approved=true approves, approved=false rejects."""
        if payload.approved:
            item = await approval_service.approve_content(db, kind, payload.id, principal)
        else:
            item = await approval_service.reject_content(db, kind, payload.id, principal, reason=payload.reason)
        message = messages["approved"] if payload.approved else messages["rejected"]
        return ok((await present(db, [item]))[0], message=message)

    @router.delete("", response_model=ApiResponse[ContentDeleted])
    async def delete(
        id: UUID = Query(..., description="Item to delete"),
        principal: Principal = Depends(get_current_principal),
        db: AsyncSession = Depends(get_db),
    ):
        deleted_id = await content_service.delete_content(db, kind, id, principal)
        return ok(ContentDeleted(id=deleted_id), message=messages["deleted"])

    @router.post("/{content_id}/submit", response_model=ApiResponse[out_schema])
    async def submit(
        content_id: UUID,
        principal: Principal = Depends(get_current_principal),
        db: AsyncSession = Depends(get_db),
    ):
        item = await approval_service.submit_for_review(db, kind, content_id, principal)
        return ok((await present(db, [item]))[0], message=messages["submitted"])

    return router
