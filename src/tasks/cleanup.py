"""
Database wipe task.

Removes every bookmark and every user. Meant for resetting a development or
end-to-end test database, never for production data.

Usage:
    python -m tasks.cleanup
"""
import asyncio
import logging
from dataclasses import dataclass

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import get_settings
from core.logging_config import configure_logging
from db.session import async_session_factory
from models.bookmark import Bookmark
from models.user import User

logger = logging.getLogger(__name__)


@dataclass
class CleanupStats:
    """Row counts removed by a cleanup run."""

    bookmarks_deleted: int = 0
    users_deleted: int = 0

    def to_dict(self) -> dict[str, int]:
        """Convert to simple dict for logging/return."""
        return {
            "bookmarks_deleted": self.bookmarks_deleted,
            "users_deleted": self.users_deleted,
        }


async def clean_db(db: AsyncSession) -> CleanupStats:
    """
    Delete all bookmarks, then all users.

    Bookmarks go first so the foreign key holds even on backends that do not
    enforce ON DELETE CASCADE. Does not commit.
    """
    bookmarks_result = await db.execute(delete(Bookmark))
    users_result = await db.execute(delete(User))
    return CleanupStats(
        bookmarks_deleted=bookmarks_result.rowcount,
        users_deleted=users_result.rowcount,
    )


async def run_cleanup(db: AsyncSession | None = None) -> CleanupStats:
    """
    Run the wipe in a single transaction.

    Args:
        db: Database session. If None, creates one from async_session_factory
            and commits on success.
    """
    logger.info("Starting cleanup task")

    if db is not None:
        stats = await clean_db(db)
    else:
        async with async_session_factory() as session, session.begin():
            stats = await clean_db(session)

    logger.info("Cleanup complete: %s", stats.to_dict())
    return stats


def main() -> None:
    """Entry point for running cleanup as a script."""
    configure_logging(get_settings().log_level)
    asyncio.run(run_cleanup())


if __name__ == "__main__":
    main()
