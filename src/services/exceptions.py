"""
Shared exceptions for service layer operations.

Every error the core raises toward a client is a `ServiceError` subclass with a
class-level `code`. The API layer maps codes to HTTP statuses in one table
(api/errors.py); nothing dispatches on instance identity.
"""
from enum import StrEnum


class ErrorCode(StrEnum):
    """Closed set of client-facing error kinds."""

    CREDENTIALS_TAKEN = "credentials_taken"
    AUTHENTICATION_FAILED = "authentication_failed"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"


class ServiceError(Exception):
    """Base class for errors that are safe to report to the client."""

    code: ErrorCode
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class CredentialsTakenError(ServiceError):
    """Raised when signup or a profile edit collides with an existing email."""

    code = ErrorCode.CREDENTIALS_TAKEN
    default_message = "Credentials taken"


class AuthenticationFailedError(ServiceError):
    """
    Raised when signin fails.

    Unknown email and wrong password both raise this with the same message so
    the client cannot tell which part of the credential was wrong.
    """

    code = ErrorCode.AUTHENTICATION_FAILED
    default_message = "Credentials incorrect"


class UnauthenticatedError(ServiceError):
    """Raised when a request carries no usable identity."""

    code = ErrorCode.UNAUTHENTICATED
    default_message = "Not authenticated"


class InvalidTokenError(UnauthenticatedError):
    """Raised when a session token is tampered, expired, or malformed."""

    default_message = "Invalid token"


class ExpiredTokenError(InvalidTokenError):
    """Raised when a session token is well-formed but past its expiry."""

    default_message = "Token has expired"


class ForbiddenError(ServiceError):
    """Raised when the authenticated user does not own the target resource."""

    code = ErrorCode.FORBIDDEN
    default_message = "You do not have access to this resource"


class NotFoundError(ServiceError):
    """Raised when the target resource does not exist."""

    code = ErrorCode.NOT_FOUND
    default_message = "Not found"
