"""
Tests for the database wipe task.

The task deletes every row it knows about, so these tests pin down exactly
what it removes and that it leaves a usable, empty schema behind.
"""
from unittest.mock import patch

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from models.bookmark import Bookmark
from models.user import User
from tasks.cleanup import CleanupStats, clean_db, run_cleanup


async def count_rows(db: AsyncSession, model: type) -> int:
    """Count all rows of a model."""
    result = await db.execute(select(func.count()).select_from(model))
    return result.scalar_one()


async def test__clean_db__removes_bookmarks_and_users(
    db_session: AsyncSession,
    user_a_bookmark: Bookmark,  # noqa: ARG001
    user_b_bookmark: Bookmark,  # noqa: ARG001
) -> None:
    stats = await clean_db(db_session)
    await db_session.commit()

    assert stats.bookmarks_deleted == 2
    assert stats.users_deleted == 2
    assert await count_rows(db_session, Bookmark) == 0
    assert await count_rows(db_session, User) == 0


async def test__clean_db__empty_database(db_session: AsyncSession) -> None:
    stats = await clean_db(db_session)

    assert stats == CleanupStats()


async def test__clean_db__users_without_bookmarks(
    db_session: AsyncSession,
    user_a: User,  # noqa: ARG001
) -> None:
    stats = await clean_db(db_session)

    assert stats.bookmarks_deleted == 0
    assert stats.users_deleted == 1


async def test__run_cleanup__uses_provided_session_without_committing(
    session_factory: async_sessionmaker[AsyncSession],
    user_a: User,  # noqa: ARG001
) -> None:
    async with session_factory() as session:
        stats = await run_cleanup(session)
        assert stats.users_deleted == 1
        await session.rollback()

    async with session_factory() as session:
        assert await count_rows(session, User) == 1


async def test__run_cleanup__commits_when_it_owns_the_session(
    session_factory: async_sessionmaker[AsyncSession],
    user_a_bookmark: Bookmark,  # noqa: ARG001
) -> None:
    with patch("tasks.cleanup.async_session_factory", session_factory):
        stats = await run_cleanup()

    assert stats.to_dict() == {"bookmarks_deleted": 1, "users_deleted": 1}
    async with session_factory() as session:
        assert await count_rows(session, Bookmark) == 0
        assert await count_rows(session, User) == 0


async def test__signup_works_after_cleanup(
    session_factory: async_sessionmaker[AsyncSession],
    user_a: User,  # noqa: ARG001
) -> None:
    """Wiping leaves the schema in place; the old email is free again."""
    with patch("tasks.cleanup.async_session_factory", session_factory):
        await run_cleanup()

    async with session_factory() as session:
        session.add(User(email="user-a@example.com", password_hash="h"))
        await session.commit()
        assert await count_rows(session, User) == 1
