"""Common schemas: camelCase base model and the {success, data, error, message} envelope."""
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """JSON uses camelCase (frontend contract); Python uses snake_case. Both accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(CamelModel, Generic[T]):
    """Envelope wrapping every API response."""

    success: bool = Field(True, description="False when the request failed")
    data: Optional[T] = None
    error: Optional[str] = Field(None, description="Error message when success=false")
    message: Optional[str] = Field(None, description="Optional human-readable message")


class ErrorResponse(CamelModel):
    """Failure envelope (documented in OpenAPI responses)."""

    success: bool = False
    error: str = Field(..., description="Error message")
    code: Optional[str] = Field(None, description="Optional error code")


def ok(data=None, message: Optional[str] = None) -> dict:
    """Success envelope as a plain dict; validated against the route's response_model."""
    return {"success": True, "data": data, "message": message}
