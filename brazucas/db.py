"""Async database engine and sessions (SQLAlchemy 2.0 + asyncpg).

The engine is built on first use instead of at import time, so tests and
scripts can point the app at another database through ``get_db`` overrides
or an explicit ``build_engine`` call.
"""
from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from brazucas.config import Settings, get_settings


class Base(DeclarativeBase):
    """Declarative base for all models."""

    pass


def build_engine(database_url: Optional[str] = None, settings: Optional[Settings] = None, **kwargs) -> AsyncEngine:
    """Create an async engine; DATABASE_URL from settings unless given."""
    settings = settings or get_settings()
    return create_async_engine(
        database_url or settings.database_url,
        echo=settings.app_env == "local",
        future=True,
        **kwargs,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to ``engine``."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


@lru_cache
def get_engine() -> AsyncEngine:
    """Process-wide engine for the configured DATABASE_URL."""
    return build_engine()


@lru_cache
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    return build_session_factory(get_engine())


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields an async session; commit on success, rollback on error."""
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def dispose_engine() -> None:
    """Close pooled connections if the engine was ever created."""
    if get_engine.cache_info().currsize:
        await get_engine().dispose()
