"""
Password hashing for HTTP Basic credentials (passlib + bcrypt).

Never stores or logs raw passwords.
"""
from functools import lru_cache

from passlib.context import CryptContext

from app.config import get_settings

# bcrypt hard limit
BCRYPT_MAX_BYTES = 72


@lru_cache
def get_password_context() -> CryptContext:
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=get_settings().password_hash_rounds,
    )


def _truncate(password: str) -> bytes:
    """UTF-8 encode and cut to what bcrypt actually hashes."""
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash a password with bcrypt.

    Raises:
        ValueError: If the password is empty
    """
    if not password:
        raise ValueError("Password cannot be empty")
    return get_password_context().hash(_truncate(password))


def verify_password(plain: str, hashed: str) -> bool:
    """Check a plain password against a stored hash; empty input never matches."""
    if not plain or not hashed:
        return False
    return get_password_context().verify(_truncate(plain), hashed)
