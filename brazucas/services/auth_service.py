"""Password hashing (bcrypt) and JWT bearer tokens (python-jose)."""
import uuid
from datetime import timedelta
from typing import Any, Dict, Optional

import bcrypt
from jose import JWTError, jwt

from brazucas.config import Settings, get_settings
from brazucas.errors import AuthenticationError
from brazucas.services.permissions import Principal, UserRole
from brazucas.utils.clock import utcnow

BEARER_PREFIX = "Bearer "


def hash_password(password: str, settings: Optional[Settings] = None) -> str:
    """bcrypt hash; bcrypt only looks at the first 72 bytes."""
    settings = settings or get_settings()
    password_bytes = password.encode("utf-8")[:72]
    hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=settings.bcrypt_rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8")[:72], password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash.
        return False


def create_access_token(
    user_id: uuid.UUID,
    email: str,
    role: str,
    settings: Optional[Settings] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Signed JWT: sub=user id, email, role, exp."""
    settings = settings or get_settings()
    expire = utcnow() + (expires_delta or timedelta(minutes=settings.jwt_expires_minutes))
    claims: Dict[str, Any] = {
        "sub": str(user_id),
        "email": email,
        "role": role,
        "exp": expire,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Optional[Settings] = None) -> Principal:
    """Verify signature/expiry and turn the claims into a Principal."""
    settings = settings or get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        raise AuthenticationError("Invalid token", code="invalid_token")
    try:
        return Principal(
            id=uuid.UUID(str(payload["sub"])),
            email=str(payload.get("email") or ""),
            role=UserRole(payload.get("role")),
        )
    except (KeyError, ValueError):
        raise AuthenticationError("Invalid token", code="invalid_token")


def extract_bearer_token(authorization: Optional[str]) -> str:
    """Token part of an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        raise AuthenticationError("Authorization header is required", code="missing_token")
    if not authorization.startswith(BEARER_PREFIX):
        raise AuthenticationError("Authorization header missing or invalid", code="invalid_token")
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise AuthenticationError("Authorization header missing or invalid", code="invalid_token")
    return token
