"""News post request/response schemas."""
import uuid
from typing import Optional

from pydantic import Field

from brazucas.schemas.common import CamelModel
from brazucas.schemas.content import ContentOut, OptionalUrl


class NewsCreate(CamelModel):
    """Body for POST /api/news."""

    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1, max_length=10000)
    excerpt: str = Field(..., min_length=1, max_length=300)
    image_url: OptionalUrl = None
    published: bool = False


class NewsUpdate(CamelModel):
    """Body for PUT /api/news: id plus any fields to change."""

    id: uuid.UUID
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = Field(None, min_length=1, max_length=10000)
    excerpt: Optional[str] = Field(None, min_length=1, max_length=300)
    image_url: OptionalUrl = None
    published: Optional[bool] = None


class NewsOut(ContentOut):
    title: str
    content: str
    excerpt: str
    image_url: Optional[str] = None
