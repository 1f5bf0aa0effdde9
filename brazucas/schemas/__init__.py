"""Pydantic request/response schemas."""
from brazucas.schemas.common import ApiResponse, CamelModel, ErrorResponse
from brazucas.schemas.auth import (
    AdminRegisterRequest,
    AuthOut,
    LoginRequest,
    RegisterRequest,
    UserOut,
)
from brazucas.schemas.content import ApprovalRequest, ContentDeleted, ContentOut, StatusHistoryOut
from brazucas.schemas.news import NewsCreate, NewsOut, NewsUpdate
from brazucas.schemas.ads import AdCreate, AdOut, AdUpdate
from brazucas.schemas.categories import CategoryCreate, CategoryDeleted, CategoryOut, CategoryUpdate
from brazucas.schemas.stats import AdminStatsOut, ContentStats
from brazucas.schemas.status import AvailableStatusOut, ContextualStatusOut, StatusSystemOut

__all__ = [
    "ApiResponse",
    "CamelModel",
    "ErrorResponse",
    "AdminRegisterRequest",
    "AuthOut",
    "LoginRequest",
    "RegisterRequest",
    "UserOut",
    "ApprovalRequest",
    "ContentDeleted",
    "ContentOut",
    "StatusHistoryOut",
    "NewsCreate",
    "NewsOut",
    "NewsUpdate",
    "AdCreate",
    "AdOut",
    "AdUpdate",
    "CategoryCreate",
    "CategoryDeleted",
    "CategoryOut",
    "CategoryUpdate",
    "AdminStatsOut",
    "ContentStats",
    "AvailableStatusOut",
    "ContextualStatusOut",
    "StatusSystemOut",
]
