"""Password hashing with argon2id."""
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

# Library defaults follow the RFC 9106 low-memory profile (argon2id, 64 MiB).
_hasher = PasswordHasher()


def hash_password(plaintext: str) -> str:
    """Hash a plaintext password. Each call uses a fresh random salt."""
    return _hasher.hash(plaintext)


def verify_password(password_hash: str, plaintext: str) -> bool:
    """
    Check a plaintext password against a stored argon2 hash.

    Returns False for a wrong password and for a stored value that is not a
    valid argon2 hash. Never raises for bad input.
    """
    try:
        return _hasher.verify(password_hash, plaintext)
    except (VerificationError, InvalidHashError):
        return False


def needs_rehash(password_hash: str) -> bool:
    """Return True if the hash was made with weaker parameters than the current ones."""
    try:
        return _hasher.check_needs_rehash(password_hash)
    except (InvalidHashError, ValueError):
        return False
