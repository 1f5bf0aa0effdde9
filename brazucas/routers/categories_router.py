"""API /api/service-categories: public reads, admin writes."""
from typing import List, Optional, Union
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from brazucas.db import get_db
from brazucas.deps import get_current_principal
from brazucas.schemas.categories import CategoryCreate, CategoryDeleted, CategoryOut, CategoryUpdate
from brazucas.schemas.common import ApiResponse, ok
from brazucas.schemas.content import row_to_dict
from brazucas.services import category_service
from brazucas.services.permissions import Principal
from brazucas.utils.query_params import ensure_bool_query

router = APIRouter(prefix="/api/service-categories", tags=["service-categories"])


def _out(category) -> CategoryOut:
    return CategoryOut.model_validate(row_to_dict(category))


@router.get("", response_model=ApiResponse[Union[CategoryOut, List[CategoryOut]]])
async def get_categories(
    id: Optional[UUID] = Query(None, description="Return a single category"),
    active: Optional[str] = Query(None, description="true: only active categories"),
    db: AsyncSession = Depends(get_db),
):
    if id is not None:
        return ok(_out(await category_service.get_category(db, id)))
    categories = await category_service.list_categories(db, active_only=ensure_bool_query(active))
    return ok([_out(c) for c in categories])


@router.post("", response_model=ApiResponse[CategoryOut], status_code=status.HTTP_201_CREATED)
async def post_category(
    payload: CategoryCreate,
    principal: Principal = Depends(get_current_principal),
    db: AsyncSession = Depends(get_db),
):
    category = await category_service.create_category(db, payload.name, principal, active=payload.active)
    return ok(_out(category), message="Service category created successfully")


@router.put("", response_model=ApiResponse[CategoryOut])
async def put_category(
    payload: CategoryUpdate,
    id: UUID = Query(..., description="Category to update"),
    principal: Principal = Depends(get_current_principal),
    db: AsyncSession = Depends(get_db),
):
    category = await category_service.update_category(
        db, id, principal, name=payload.name, active=payload.active
    )
    return ok(_out(category), message="Service category updated successfully")


@router.delete("", response_model=ApiResponse[CategoryDeleted])
async def delete_category(
    id: UUID = Query(..., description="Category to delete"),
    principal: Principal = Depends(get_current_principal),
    db: AsyncSession = Depends(get_db),
):
    deleted_id = await category_service.delete_category(db, id, principal)
    return ok(CategoryDeleted(id=deleted_id), message="Service category deleted successfully")
