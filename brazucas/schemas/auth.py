"""Auth request/response schemas (register, login, me, register-admin)."""
import re
import uuid
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from brazucas.schemas.common import CamelModel
from brazucas.services.permissions import UserRole

NICKNAME_PATTERN = r"^[a-zA-Z0-9_\s]+$"
_PASSWORD_CLASSES = (re.compile(r"[a-z]"), re.compile(r"[A-Z]"), re.compile(r"\d"))
PUBLIC_ROLES = (UserRole.NORMAL, UserRole.ADVERTISER)


def check_password_strength(value: str) -> str:
    """At least 8 chars with lowercase, uppercase and a digit."""
    if len(value) < 8:
        raise ValueError("Password must be at least 8 characters")
    if not all(pattern.search(value) for pattern in _PASSWORD_CLASSES):
        raise ValueError(
            "Password must contain at least one uppercase letter, one lowercase letter, and one number"
        )
    return value


class RegisterRequest(CamelModel):
    """Body for POST /api/register. Admins register through /api/register-admin."""

    email: EmailStr
    nickname: str = Field(..., min_length=2, max_length=50, pattern=NICKNAME_PATTERN)
    password: str
    role: UserRole = UserRole.NORMAL

    @field_validator("password")
    @classmethod
    def _strong_password(cls, v: str) -> str:
        return check_password_strength(v)

    @field_validator("role")
    @classmethod
    def _public_role(cls, v: UserRole) -> UserRole:
        if v not in PUBLIC_ROLES:
            raise ValueError("Role must be 'normal' or 'advertiser'")
        return v


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class AdminRegisterRequest(CamelModel):
    """Body for POST /api/register-admin (needs ADMIN_SECRET_KEY)."""

    email: EmailStr
    password: str = Field(..., min_length=8)
    nickname: str = Field("Admin", min_length=2, max_length=50, pattern=NICKNAME_PATTERN)
    admin_secret_key: str


class UserOut(CamelModel):
    """User without password hash."""

    id: uuid.UUID
    email: str
    nickname: str
    role: UserRole
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AuthOut(CamelModel):
    token: str
    user: UserOut
