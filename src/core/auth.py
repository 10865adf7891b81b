"""Authentication dependency: bearer session token to User."""
import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings, get_settings
from db.session import get_async_session
from models.user import User
from services import token_service, user_service
from services.exceptions import InvalidTokenError

logger = logging.getLogger(__name__)


# HTTP Bearer token scheme. auto_error=False so a missing header produces our
# 401 instead of FastAPI's 403.
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def authenticate(
    credentials: HTTPAuthorizationCredentials | None,
    db: AsyncSession,
    settings: Settings,
) -> User:
    """
    Resolve bearer credentials to a live user.

    Exactly one outcome per call: the User is returned, or a 401 is raised.
    The token's subject is re-resolved against the database so a token for a
    removed account stops working immediately.

    Raises:
        HTTPException: 401 if the header is missing, the token is invalid or
            expired, or the subject no longer exists.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    try:
        claims = token_service.decode_access_token(credentials.credentials, settings)
    except InvalidTokenError as e:
        raise _unauthorized(e.message) from None

    user = await user_service.get_user_by_id(db, claims.user_id)
    if user is None:
        logger.info("Token subject id=%s no longer exists", claims.user_id)
        raise _unauthorized("User not found")

    return user


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> User:
    """
    Dependency that validates the session token and returns the current user.

    Handlers receive the user as an explicit parameter; nothing is stored on
    request.state.
    """
    return await authenticate(credentials, db, settings)
