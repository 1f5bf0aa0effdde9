"""News post model."""
from typing import Optional

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from brazucas.db import Base
from brazucas.models.content_base import ApprovalFieldsMixin


class NewsPost(ApprovalFieldsMixin, Base):
    """Community news post submitted by a member."""

    __tablename__ = "news_posts"
    __table_args__ = (Index("ix_news_posts_published_approved", "published", "approved"),)

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    excerpt: Mapped[str] = mapped_column(String(300), nullable=False)
    image_url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
