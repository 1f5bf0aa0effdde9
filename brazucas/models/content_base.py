"""Columns shared by every content kind that goes through approval."""
import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from brazucas.utils.clock import utcnow


class ApprovalFieldsMixin:
    """
    published: author's intent to make the item visible.
    approved: None = awaiting admin decision, True = approved, False = rejected.
    approved_at: set whenever approved is not None.
    """

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    author_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    approved: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True, default=None)
    approved_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
