"""Pydantic schemas for signup and signin."""
from typing import Literal

from pydantic import BaseModel, EmailStr, Field, field_validator

from schemas.validators import normalize_email


class AuthCredentials(BaseModel):
    """Request body shared by signup and signin."""

    email: EmailStr
    password: str = Field(min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        """Normalize email for lookup and uniqueness."""
        return normalize_email(v)


class AccessTokenResponse(BaseModel):
    """Signin result. The user record itself is never returned on signin."""

    access_token: str
    token_type: Literal["bearer"] = "bearer"
