"""Bookmark CRUD endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_current_user
from models.user import User
from schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from services import bookmark_service

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])

# Primary keys are 32-bit INTEGER columns; larger ids would fail in the driver.
MAX_BOOKMARK_ID = 2**31 - 1

BookmarkId = Annotated[int, Path(ge=1, le=MAX_BOOKMARK_ID)]


@router.get("", response_model=list[BookmarkResponse])
async def list_bookmarks(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> list[BookmarkResponse]:
    """List all bookmarks for the current user."""
    bookmarks = await bookmark_service.list_bookmarks(db, current_user.id)
    return [BookmarkResponse.model_validate(b) for b in bookmarks]


@router.post("/create", response_model=BookmarkResponse, status_code=201)
async def create_bookmark(
    data: BookmarkCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Create a new bookmark owned by the current user."""
    bookmark = await bookmark_service.create_bookmark(db, current_user.id, data)
    return BookmarkResponse.model_validate(bookmark)


@router.get(
    "/{bookmark_id}",
    response_model=BookmarkResponse,
    dependencies=[Depends(get_current_user)],
)
async def get_bookmark(
    bookmark_id: BookmarkId,
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Get a single bookmark by ID. Ownership is not checked on reads."""
    bookmark = await bookmark_service.get_bookmark(db, bookmark_id)
    return BookmarkResponse.model_validate(bookmark)


@router.patch("/{bookmark_id}", status_code=204)
async def update_bookmark(
    bookmark_id: BookmarkId,
    data: BookmarkUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Update a bookmark. Only the owner may; others get 403."""
    await bookmark_service.update_bookmark(db, current_user.id, bookmark_id, data)


@router.delete("/{bookmark_id}", status_code=204)
async def delete_bookmark(
    bookmark_id: BookmarkId,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Delete a bookmark. Only the owner may; others get 403."""
    await bookmark_service.delete_bookmark(db, current_user.id, bookmark_id)
