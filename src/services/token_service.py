"""Service layer for signed session tokens (JWT)."""
import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt

from core.config import Settings
from services.exceptions import ExpiredTokenError, InvalidTokenError

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ["sub", "email", "iat", "exp"]


@dataclass(frozen=True)
class TokenClaims:
    """Verified contents of a session token."""

    user_id: int
    email: str
    issued_at: datetime
    expires_at: datetime


def create_access_token(
    user_id: int,
    email: str,
    settings: Settings,
    now: datetime | None = None,
) -> str:
    """
    Issue a signed session token for a user.

    Args:
        user_id: Becomes the `sub` claim (as a string, per RFC 7519).
        email: Carried for convenience; the guard still re-resolves the user.
        settings: Supplies the signing secret, algorithm and lifetime.
        now: Issue time. Defaults to datetime.now(UTC).

    Returns:
        The encoded JWT.
    """
    if now is None:
        now = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "email": email,
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt_expire_minutes),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> TokenClaims:
    """
    Verify a session token and return its claims.

    Signature, algorithm, expiry and the presence of every required claim are
    checked. There is no partial result: either all claims are returned or an
    error is raised.

    Raises:
        ExpiredTokenError: If the token is well-formed but past its `exp`.
        InvalidTokenError: For any other failure (bad signature, wrong secret,
            malformed token, missing or non-integer subject).
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError() from None
    except jwt.PyJWTError as e:
        # Full reason stays server-side; the client only sees "Invalid token"
        logger.warning("Session token rejected: %s", e)
        raise InvalidTokenError() from None

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        logger.warning("Session token rejected: non-integer subject")
        raise InvalidTokenError() from None

    email = payload["email"]
    if not isinstance(email, str):
        logger.warning("Session token rejected: email claim is not a string")
        raise InvalidTokenError()

    return TokenClaims(
        user_id=user_id,
        email=email,
        issued_at=datetime.fromtimestamp(payload["iat"], UTC),
        expires_at=datetime.fromtimestamp(payload["exp"], UTC),
    )
