"""Service advertisement model."""
from typing import Optional

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from brazucas.db import Base
from brazucas.models.content_base import ApprovalFieldsMixin


class Advertisement(ApprovalFieldsMixin, Base):
    """
    Service ad. price is free text ("€20/h", "a combinar").
    category holds a ServiceCategory name.
    """

    __tablename__ = "advertisements"
    __table_args__ = (Index("ix_advertisements_published_approved", "published", "approved"),)

    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    price: Mapped[str] = mapped_column(String(20), nullable=False)
    contact_email: Mapped[str] = mapped_column(String(320), nullable=False)
    image_url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    youtube_url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
