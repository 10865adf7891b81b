"""Service layer for user records."""
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from models.user import User
from schemas.user import UserUpdate
from services.exceptions import CredentialsTakenError

logger = logging.getLogger(__name__)


async def create_user(
    db: AsyncSession,
    email: str,
    password_hash: str,
    first_name: str | None = None,
    last_name: str | None = None,
) -> User:
    """
    Insert a new user.

    Duplicate emails are detected by the unique index on users.email rather
    than a SELECT beforehand, so two concurrent signups for the same email
    cannot both succeed.

    Important: This is the first write of the signup request, so rolling the
    session back on IntegrityError discards nothing else.

    Raises:
        CredentialsTakenError: If the email is already registered.
    """
    user = User(
        email=email,
        password_hash=password_hash,
        first_name=first_name,
        last_name=last_name,
    )
    db.add(user)
    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        raise CredentialsTakenError() from None
    await db.refresh(user)
    logger.info("Created user id=%s", user.id)
    return user


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Look up a user by (normalized) email."""
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def get_user_by_id(db: AsyncSession, user_id: int) -> User | None:
    """Look up a user by primary key."""
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def update_user(db: AsyncSession, user: User, data: UserUpdate) -> User:
    """
    Apply a partial profile edit.

    Note: Does not commit. Caller (session generator) handles commit at request end.

    Raises:
        CredentialsTakenError: If the new email belongs to another user.
    """
    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(user, field, value)

    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        raise CredentialsTakenError() from None
    await db.refresh(user)
    return user
