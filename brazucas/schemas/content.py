"""Fields shared by news and ad payloads: output base and the approve/reject body."""
import uuid
from datetime import datetime
from typing import Annotated, Any, Dict, Optional

from pydantic import BeforeValidator, Field, HttpUrl, StrictBool
from sqlalchemy import inspect

from brazucas.schemas.common import CamelModel
from brazucas.services.status_service import ContentStatus, status_of


def blank_to_none(value):
    """Frontends send "" for an empty optional URL field."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


OptionalUrl = Annotated[Optional[HttpUrl], BeforeValidator(blank_to_none)]


def row_to_dict(row) -> Dict[str, Any]:
    """Mapped column values of an ORM instance, keyed by attribute name."""
    return {attr.key: getattr(row, attr.key) for attr in inspect(row).mapper.column_attrs}


class ContentOut(CamelModel):
    """Approval fields plus the derived status and author nickname."""

    id: uuid.UUID
    author_id: uuid.UUID
    author_nickname: Optional[str] = None
    published: bool
    approved: Optional[bool] = None
    approved_at: Optional[datetime] = None
    status: Optional[ContentStatus] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_item(cls, item, author_nickname: Optional[str] = None):
        data = row_to_dict(item)
        data["status"] = status_of(item)
        data["author_nickname"] = author_nickname
        return cls.model_validate(data)


class ApprovalRequest(CamelModel):
    """Body for PATCH /api/news and /api/ads: approved=true approves, false rejects."""

    id: uuid.UUID
    approved: StrictBool
    reason: Optional[str] = Field(None, max_length=500, description="Shown to the author on rejection")


class StatusHistoryOut(CamelModel):
    """One audit row of content_status_history."""

    id: uuid.UUID
    content_type: str
    content_id: uuid.UUID
    event_type: str
    status_code: str
    approved: Optional[bool] = None
    changed_by: Optional[uuid.UUID] = None
    reason: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    created_at: datetime


class ContentDeleted(CamelModel):
    id: uuid.UUID
    deleted: bool = True
