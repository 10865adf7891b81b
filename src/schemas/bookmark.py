"""Pydantic schemas for bookmark endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from schemas.validators import validate_link


class BookmarkCreate(BaseModel):
    """Schema for creating a new bookmark."""

    title: str = Field(min_length=1, max_length=500)
    description: str | None = None
    link: str

    @field_validator("link")
    @classmethod
    def check_link(cls, v: str) -> str:
        """Validate link is an http(s) URL."""
        return validate_link(v)


class BookmarkUpdate(BaseModel):
    """
    Schema for updating an existing bookmark.

    Only fields present in the request body are applied. The owner cannot be
    changed, so user_id is not accepted.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = None
    link: str | None = None

    @field_validator("title", "link")
    @classmethod
    def reject_null(cls, v: str | None) -> str:
        """title and link are required columns; they may be omitted but not nulled."""
        if v is None:
            raise ValueError("field cannot be null")
        return v

    @field_validator("link")
    @classmethod
    def check_link(cls, v: str) -> str:
        """Validate link is an http(s) URL."""
        return validate_link(v)


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str | None
    link: str
    created_at: datetime
    updated_at: datetime
