"""Advertisement request/response schemas."""
import uuid
from typing import Optional

from pydantic import EmailStr, Field

from brazucas.schemas.common import CamelModel
from brazucas.schemas.content import ContentOut, OptionalUrl


class AdCreate(CamelModel):
    """Body for POST /api/ads."""

    title: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=500)
    category: str = Field(..., min_length=1, max_length=50)
    price: str = Field(..., min_length=1, max_length=20)
    contact_email: EmailStr
    image_url: OptionalUrl = None
    youtube_url: OptionalUrl = None
    published: bool = False


class AdUpdate(CamelModel):
    """Body for PUT /api/ads: id plus any fields to change."""

    id: uuid.UUID
    title: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1, max_length=500)
    category: Optional[str] = Field(None, min_length=1, max_length=50)
    price: Optional[str] = Field(None, min_length=1, max_length=20)
    contact_email: Optional[EmailStr] = None
    image_url: OptionalUrl = None
    youtube_url: OptionalUrl = None
    published: Optional[bool] = None


class AdOut(ContentOut):
    title: str
    description: str
    category: str
    price: str
    contact_email: str
    image_url: Optional[str] = None
    youtube_url: Optional[str] = None
