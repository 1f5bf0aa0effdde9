"""
Shared fixtures: in-memory SQLite (aiosqlite) with the app's get_db overridden.
Settings are read once, so the env below must be set before brazucas is imported.
"""
import os

os.environ["APP_ENV"] = "test"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["REDIS_URL"] = ""
os.environ["JWT_SECRET"] = "test-jwt-secret"
os.environ["ADMIN_SECRET_KEY"] = "test-admin-secret"

import uuid
from typing import Optional

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from brazucas.db import Base, build_engine, build_session_factory, get_db
from brazucas.main import app
from brazucas.services.auth_service import create_access_token
from brazucas.services.permissions import Principal, UserRole
from brazucas.services.user_service import create_user

TEST_PASSWORD = "Passw0rdOk"


@pytest_asyncio.fixture
async def engine():
    engine = build_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as s:
            try:
                yield s
                await s.commit()
            except Exception:
                await s.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


async def make_user(
    session,
    role: UserRole = UserRole.NORMAL,
    email: Optional[str] = None,
    nickname: str = "Joao Silva",
) -> Principal:
    """Insert a user and return its Principal."""
    email = email or f"{role.value}-{uuid.uuid4().hex[:8]}@example.com"
    user = await create_user(session, email, nickname, TEST_PASSWORD, role)
    return Principal(id=user.id, email=user.email, role=UserRole(user.role))


async def make_user_token(session_factory, role: UserRole = UserRole.NORMAL, nickname: str = "Joao Silva"):
    """Committed user plus its bearer header, for HTTP tests. Returns (principal, headers)."""
    async with session_factory() as s:
        principal = await make_user(s, role=role, nickname=nickname)
        user_token = create_access_token(principal.id, principal.email, principal.role.value)
        await s.commit()
    return principal, {"Authorization": f"Bearer {user_token}"}
