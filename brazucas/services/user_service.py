"""Accounts: register, login, admin bootstrap, lookups."""
import secrets
from typing import Optional, Tuple
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from brazucas.config import get_settings
from brazucas.errors import AuthenticationError, ConflictError, ForbiddenError, NotFoundError
from brazucas.logging_config import get_logger
from brazucas.models import User
from brazucas.services.auth_service import create_access_token, hash_password, verify_password
from brazucas.services.permissions import UserRole
from brazucas.utils.clock import utcnow

logger = get_logger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    r = await db.execute(select(User).where(User.email == _normalize_email(email)))
    return r.scalar_one_or_none()


async def get_user(db: AsyncSession, user_id: UUID) -> User:
    """User by id; NotFoundError when it no longer exists."""
    user = await db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found", code="user_not_found")
    return user


async def create_user(
    db: AsyncSession,
    email: str,
    nickname: str,
    password: str,
    role: UserRole,
) -> User:
    """Insert a user with a hashed password. ConflictError on duplicate email."""
    if await get_user_by_email(db, email):
        raise ConflictError("User with this email already exists", code="email_taken")
    now = utcnow()
    user = User(
        email=_normalize_email(email),
        nickname=nickname.strip(),
        password_hash=hash_password(password),
        role=role.value,
        created_at=now,
        updated_at=now,
    )
    db.add(user)
    await db.flush()
    logger.info("user.created", user_id=str(user.id), role=user.role)
    return user


def issue_token(user: User) -> str:
    return create_access_token(user.id, user.email, user.role)


async def register(
    db: AsyncSession,
    email: str,
    nickname: str,
    password: str,
    role: UserRole = UserRole.NORMAL,
) -> Tuple[User, str]:
    """Public sign-up (normal/advertiser). Returns (user, token)."""
    if role == UserRole.ADMIN:
        raise ForbiddenError("Admin accounts require the admin registration", code="admin_role_forbidden")
    user = await create_user(db, email, nickname, password, role)
    return user, issue_token(user)


async def login(db: AsyncSession, email: str, password: str) -> Tuple[User, str]:
    """Same error for unknown email and wrong password."""
    user = await get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("auth.login_failed", email=_normalize_email(email))
        raise AuthenticationError("Invalid credentials", code="invalid_credentials")
    logger.info("auth.login", user_id=str(user.id))
    return user, issue_token(user)


async def register_admin(
    db: AsyncSession,
    email: str,
    password: str,
    nickname: str,
    admin_secret_key: str,
) -> Tuple[User, str]:
    """Create an admin when the caller knows ADMIN_SECRET_KEY."""
    expected = get_settings().admin_secret_key
    if not secrets.compare_digest(admin_secret_key.encode("utf-8"), expected.encode("utf-8")):
        logger.warning("auth.admin_secret_mismatch", email=_normalize_email(email))
        raise ForbiddenError("Invalid admin secret key", code="invalid_admin_secret")
    user = await create_user(db, email, nickname, password, UserRole.ADMIN)
    return user, issue_token(user)


async def ensure_admin(db: AsyncSession, email: str, password: str, nickname: str = "Admin") -> Tuple[User, bool]:
    """
    Bootstrap an admin from the CLI. Idempotent: an existing account with that
    email is returned untouched. Returns (user, created).
    """
    existing = await get_user_by_email(db, email)
    if existing is not None:
        logger.info("admin.exists", user_id=str(existing.id), role=existing.role)
        return existing, False
    user = await create_user(db, email, nickname, password, UserRole.ADMIN)
    return user, True


async def count_users(db: AsyncSession) -> int:
    r = await db.execute(select(func.count(User.id)))
    return r.scalar() or 0
