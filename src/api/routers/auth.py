"""Signup and signin endpoints. Neither requires an existing session."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_settings
from core.config import Settings
from models.user import User
from schemas.auth import AccessTokenResponse, AuthCredentials
from schemas.user import UserResponse
from services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=UserResponse, status_code=201)
async def signup(
    data: AuthCredentials,
    db: AsyncSession = Depends(get_async_session),
) -> User:
    """
    Create an account.

    Returns the new user without its password hash. A taken email returns 403.
    """
    return await auth_service.signup(db, data)


@router.post("/signin", response_model=AccessTokenResponse)
async def signin(
    data: AuthCredentials,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> AccessTokenResponse:
    """
    Exchange email and password for a session token.

    Unknown email and wrong password both return the same 403.
    """
    token = await auth_service.signin(db, data, settings)
    return AccessTokenResponse(access_token=token)
