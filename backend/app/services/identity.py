"""
Identity resolver - maps an authenticated principal name to its User row.
"""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import NotFoundError
from app.models import User
from app.services.passwords import verify_password

logger = logging.getLogger(__name__)


async def find_user_by_username(db: AsyncSession, username: str) -> User | None:
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def resolve_user(db: AsyncSession, username: str) -> User:
    """Return the User for ``username`` or raise NotFoundError."""
    user = await find_user_by_username(db, username)
    if user is None:
        raise NotFoundError(f"User not found: {username}")
    return user


async def authenticate(db: AsyncSession, username: str, password: str) -> User | None:
    """Return the user when the credentials match, otherwise None."""
    user = await find_user_by_username(db, username)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Rejected credentials", extra={"username": username})
        return None
    return user
