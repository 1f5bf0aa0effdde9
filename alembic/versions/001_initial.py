"""initial schema: users, news_posts, advertisements, service_categories, content_status_history

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _approval_columns() -> list:
    return [
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("author_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("published", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("approved", sa.Boolean(), nullable=True),
        sa.Column("approved_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("nickname", sa.String(50), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(32), server_default="normal", nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "news_posts",
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("excerpt", sa.String(300), nullable=False),
        sa.Column("image_url", sa.String(2048), nullable=True),
        *_approval_columns(),
    )
    op.create_index("ix_news_posts_author_id", "news_posts", ["author_id"])
    op.create_index("ix_news_posts_published_approved", "news_posts", ["published", "approved"])

    op.create_table(
        "advertisements",
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.String(500), nullable=False),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("price", sa.String(20), nullable=False),
        sa.Column("contact_email", sa.String(320), nullable=False),
        sa.Column("image_url", sa.String(2048), nullable=True),
        sa.Column("youtube_url", sa.String(2048), nullable=True),
        *_approval_columns(),
    )
    op.create_index("ix_advertisements_author_id", "advertisements", ["author_id"])
    op.create_index("ix_advertisements_published_approved", "advertisements", ["published", "approved"])

    op.create_table(
        "service_categories",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("active", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_service_categories_name"),
    )

    op.create_table(
        "content_status_history",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("content_type", sa.String(16), nullable=False),
        sa.Column("content_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("event_type", sa.String(32), nullable=False),
        sa.Column("status_code", sa.String(32), nullable=False),
        sa.Column("approved", sa.Boolean(), nullable=True),
        sa.Column("changed_by", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column("metadata", postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_content_status_history_content_type", "content_status_history", ["content_type"])
    op.create_index("ix_content_status_history_content_id", "content_status_history", ["content_id"])


def downgrade() -> None:
    op.drop_index("ix_content_status_history_content_id", table_name="content_status_history")
    op.drop_index("ix_content_status_history_content_type", table_name="content_status_history")
    op.drop_table("content_status_history")
    op.drop_table("service_categories")
    op.drop_index("ix_advertisements_published_approved", table_name="advertisements")
    op.drop_index("ix_advertisements_author_id", table_name="advertisements")
    op.drop_table("advertisements")
    op.drop_index("ix_news_posts_published_approved", table_name="news_posts")
    op.drop_index("ix_news_posts_author_id", table_name="news_posts")
    op.drop_table("news_posts")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
