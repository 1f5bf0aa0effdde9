"""Service category schemas."""
import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from brazucas.schemas.common import CamelModel


class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=50)
    active: bool = True


class CategoryUpdate(CamelModel):
    """Body for PUT /api/service-categories?id=...; omitted fields stay as they are."""

    name: Optional[str] = Field(None, min_length=1, max_length=50)
    active: Optional[bool] = None


class CategoryOut(CamelModel):
    id: uuid.UUID
    name: str
    active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CategoryDeleted(CamelModel):
    id: uuid.UUID
    deleted: bool = True
