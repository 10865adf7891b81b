"""Async engine construction and the request-scoped session dependency."""
from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from core.config import get_settings


def build_engine(
    database_url: str,
    pool_size: int = 5,
    max_overflow: int = 10,
) -> AsyncEngine:
    """
    Create an async engine for `database_url`.

    Pool sizing only applies to server databases; SQLite (used by the test
    suite) picks its own pool class and rejects these arguments.
    """
    options: dict[str, Any] = {"echo": False, "pool_pre_ping": True}
    if make_url(database_url).get_backend_name() != "sqlite":
        options["pool_size"] = pool_size
        options["max_overflow"] = max_overflow
    return create_async_engine(database_url, **options)


settings = get_settings()

engine = build_engine(
    settings.database_url,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """
    Yield one session per request.

    Services only flush; the single commit happens here after the handler
    returns. Any exception rolls the whole request back and is re-raised so
    the error handlers still see it.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
