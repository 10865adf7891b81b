"""Service layer for bookmark CRUD operations."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from schemas.bookmark import BookmarkCreate, BookmarkUpdate
from services.exceptions import ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)

BOOKMARK_NOT_FOUND = "Bookmark not found"


async def create_bookmark(
    db: AsyncSession,
    user_id: int,
    data: BookmarkCreate,
) -> Bookmark:
    """
    Create a new bookmark owned by the requesting user.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    bookmark = Bookmark(
        user_id=user_id,
        title=data.title,
        description=data.description,
        link=data.link,
    )
    db.add(bookmark)
    await db.flush()
    await db.refresh(bookmark)
    return bookmark


async def list_bookmarks(db: AsyncSession, user_id: int) -> list[Bookmark]:
    """Get all bookmarks owned by a user, newest first."""
    result = await db.execute(
        select(Bookmark)
        .where(Bookmark.user_id == user_id)
        .order_by(Bookmark.created_at.desc(), Bookmark.id.desc()),
    )
    return list(result.scalars().all())


async def get_bookmark(db: AsyncSession, bookmark_id: int) -> Bookmark:
    """
    Get a bookmark by ID for any authenticated caller.

    Reads are not owner-scoped; only update and delete go through
    get_owned_bookmark.

    Raises:
        NotFoundError: If no bookmark has this id.
    """
    bookmark = await db.get(Bookmark, bookmark_id)
    if bookmark is None:
        raise NotFoundError(BOOKMARK_NOT_FOUND)
    return bookmark


async def get_owned_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
) -> Bookmark:
    """
    Load a bookmark for mutation and confirm the user owns it.

    Must run before any change is applied, in the same session as the change.

    Raises:
        NotFoundError: If no bookmark has this id.
        ForbiddenError: If the bookmark belongs to another user.
    """
    bookmark = await db.get(Bookmark, bookmark_id)
    if bookmark is None:
        raise NotFoundError(BOOKMARK_NOT_FOUND)
    if bookmark.user_id != user_id:
        logger.warning(
            "User id=%s denied access to bookmark id=%s",
            user_id,
            bookmark_id,
        )
        raise ForbiddenError()
    return bookmark


async def update_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
    data: BookmarkUpdate,
) -> Bookmark:
    """
    Apply a partial update to a bookmark the user owns.

    Note: Does not commit. Caller (session generator) handles commit at request end.

    Raises:
        NotFoundError: If no bookmark has this id.
        ForbiddenError: If the bookmark belongs to another user.
    """
    bookmark = await get_owned_bookmark(db, user_id, bookmark_id)

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(bookmark, field, value)

    await db.flush()
    await db.refresh(bookmark)
    return bookmark


async def delete_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
) -> None:
    """
    Delete a bookmark the user owns.

    Note: Does not commit. Caller (session generator) handles commit at request end.

    Raises:
        NotFoundError: If no bookmark has this id.
        ForbiddenError: If the bookmark belongs to another user.
    """
    bookmark = await get_owned_bookmark(db, user_id, bookmark_id)
    await db.delete(bookmark)
    await db.flush()
