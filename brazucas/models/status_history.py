"""Audit log of approval/status changes on news and ads."""
import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Boolean, DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from brazucas.db import Base
from brazucas.utils.clock import utcnow


class StatusHistoryEntry(Base):
    """
    One row per status-affecting change (create, edit, submit, approve, reject).
    content_id is not a foreign key: entries outlive deleted items.
    Never read back to compute status; published/approved on the item are authoritative.
    """

    __tablename__ = "content_status_history"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    content_type: Mapped[str] = mapped_column(String(16), nullable=False, index=True)  # news | ads
    content_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    event_type: Mapped[str] = mapped_column(String(32), nullable=False)
    status_code: Mapped[str] = mapped_column(String(32), nullable=False)
    approved: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    changed_by: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid(as_uuid=True), nullable=True)
    reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    metadata_: Mapped[Optional[dict]] = mapped_column("metadata", JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
