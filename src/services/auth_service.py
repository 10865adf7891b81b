"""
Signup and signin orchestration.

Signup hashes the password and inserts the user; signin looks the user up,
verifies the password and issues a session token. Argon2 is CPU-bound, so
hashing and verification run in the threadpool instead of on the event loop.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from core.config import Settings
from core.passwords import hash_password, needs_rehash, verify_password
from models.user import User
from schemas.auth import AuthCredentials
from services import token_service, user_service
from services.exceptions import AuthenticationFailedError

logger = logging.getLogger(__name__)

# Verified against when the email is unknown, so both failure paths pay for
# one argon2 verification and take about the same time.
_DUMMY_HASH = hash_password("dummy-password-for-timing")


async def signup(db: AsyncSession, data: AuthCredentials) -> User:
    """
    Create a new account.

    Returns the User ORM object; routes serialize it through UserResponse,
    which has no password field.

    Raises:
        CredentialsTakenError: If the email is already registered.
    """
    password_hash = await run_in_threadpool(hash_password, data.password)
    return await user_service.create_user(db, data.email, password_hash)


async def signin(
    db: AsyncSession,
    data: AuthCredentials,
    settings: Settings,
) -> str:
    """
    Authenticate credentials and return a session token.

    Unknown email and wrong password raise the same AuthenticationFailedError.
    The distinction is only logged, at debug level and without the email.

    Raises:
        AuthenticationFailedError: If the credentials do not match a user.
    """
    user = await user_service.get_user_by_email(db, data.email)

    if user is None:
        await run_in_threadpool(verify_password, _DUMMY_HASH, data.password)
        logger.debug("Signin failed: user does not exist")
        raise AuthenticationFailedError()

    password_ok = await run_in_threadpool(verify_password, user.password_hash, data.password)
    if not password_ok:
        logger.debug("Signin failed: password mismatch for user id=%s", user.id)
        raise AuthenticationFailedError()

    if needs_rehash(user.password_hash):
        user.password_hash = await run_in_threadpool(hash_password, data.password)
        await db.flush()

    return token_service.create_access_token(user.id, user.email, settings)
