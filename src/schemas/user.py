"""Pydantic schemas for user endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from schemas.validators import normalize_email


class UserResponse(BaseModel):
    """
    Outward representation of a user.

    Declares no password field, so serializing a User ORM object through this
    model drops the hash.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str | None
    last_name: str | None
    created_at: datetime
    updated_at: datetime


class UserUpdate(BaseModel):
    """Schema for a partial profile edit."""

    model_config = ConfigDict(extra="forbid")

    email: EmailStr | None = None
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str | None) -> str:
        """Normalize email; null is rejected because every user has one."""
        if v is None:
            raise ValueError("email cannot be null")
        return normalize_email(v)
