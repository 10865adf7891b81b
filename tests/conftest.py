"""Pytest fixtures for testing."""
import os
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from pathlib import Path

import pytest

TEST_JWT_SECRET = "test-secret-key-that-is-at-least-32-bytes-long"

# Must be set before any app import that triggers Settings validation
# (db.session builds its engine at import time). Tests override the session
# and settings dependencies, so this engine is never connected.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", TEST_JWT_SECRET)

from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
)
from testcontainers.postgres import PostgresContainer  # noqa: E402

from core.config import Settings  # noqa: E402
from core.passwords import hash_password  # noqa: E402
from db.session import build_engine  # noqa: E402
from models.base import Base  # noqa: E402
from models.bookmark import Bookmark  # noqa: E402
from models.user import User  # noqa: E402
from services.token_service import create_access_token  # noqa: E402

USER_A_PASSWORD = "strongpassword123"
USER_B_PASSWORD = "ultimatepassword456"


@pytest.fixture(scope="session")
def postgres_url() -> Generator[str | None]:
    """
    Start a PostgreSQL container for the session when TEST_POSTGRES is set.

    Without it the suite runs on a per-test SQLite file, which needs no Docker.
    """
    if not os.environ.get("TEST_POSTGRES"):
        yield None
        return
    with PostgresContainer("postgres:16", driver="asyncpg") as postgres:
        yield postgres.get_connection_url()


@pytest.fixture
def database_url(postgres_url: str | None, tmp_path: Path) -> str:
    """Database URL for this test."""
    if postgres_url is not None:
        return postgres_url
    return f"sqlite+aiosqlite:///{tmp_path}/test.db"


@pytest.fixture
async def async_engine(database_url: str) -> AsyncGenerator[AsyncEngine]:
    """Create an async engine with a freshly created schema."""
    engine = build_engine(database_url)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    """
    Session for arranging and inspecting data directly.

    API requests use their own sessions (see `client`), so fixtures commit
    what they create for the app to see it.
    """
    async with session_factory() as session:
        yield session


@pytest.fixture
def test_settings(database_url: str) -> Settings:
    """Settings used by the app under test."""
    return Settings(
        _env_file=None,
        database_url=database_url,
        jwt_secret=TEST_JWT_SECRET,
    )


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
    test_settings: Settings,
) -> AsyncGenerator[AsyncClient]:
    """
    Create a test client whose requests each get their own session.

    The override commits and rolls back exactly like db.session.get_async_session.
    """
    from api.main import app
    from core.config import get_settings
    from db.session import get_async_session

    async def override_get_async_session() -> AsyncGenerator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    def override_get_settings() -> Settings:
        return test_settings

    app.dependency_overrides[get_async_session] = override_get_async_session
    app.dependency_overrides[get_settings] = override_get_settings

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def make_user(
    db_session: AsyncSession,
) -> Callable[[str, str], Awaitable[User]]:
    """Factory that inserts and commits a user with a hashed password."""

    async def _make_user(email: str, password: str) -> User:
        user = User(email=email, password_hash=hash_password(password))
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
async def user_a(make_user: Callable[[str, str], Awaitable[User]]) -> User:
    """Create the first test user (User A)."""
    return await make_user("user-a@example.com", USER_A_PASSWORD)


@pytest.fixture
async def user_b(make_user: Callable[[str, str], Awaitable[User]]) -> User:
    """Create a second test user (User B) for isolation tests."""
    return await make_user("user-b@example.com", USER_B_PASSWORD)


def auth_headers_for(user: User, settings: Settings) -> dict[str, str]:
    """Build an Authorization header carrying a fresh session token for the user."""
    token = create_access_token(user.id, user.email, settings)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_a_headers(user_a: User, test_settings: Settings) -> dict[str, str]:
    """Authorization header for User A."""
    return auth_headers_for(user_a, test_settings)


@pytest.fixture
def user_b_headers(user_b: User, test_settings: Settings) -> dict[str, str]:
    """Authorization header for User B."""
    return auth_headers_for(user_b, test_settings)


@pytest.fixture
async def user_a_bookmark(db_session: AsyncSession, user_a: User) -> Bookmark:
    """Create a bookmark belonging to User A."""
    bookmark = Bookmark(
        user_id=user_a.id,
        title="User A's Private Bookmark",
        description="This should only be changeable by User A",
        link="https://user-a-bookmark.example.com",
    )
    db_session.add(bookmark)
    await db_session.commit()
    await db_session.refresh(bookmark)
    return bookmark


@pytest.fixture
async def user_b_bookmark(db_session: AsyncSession, user_b: User) -> Bookmark:
    """Create a bookmark belonging to User B."""
    bookmark = Bookmark(
        user_id=user_b.id,
        title="User B's Private Bookmark",
        description="This should only be changeable by User B",
        link="https://user-b-bookmark.example.com",
    )
    db_session.add(bookmark)
    await db_session.commit()
    await db_session.refresh(bookmark)
    return bookmark
