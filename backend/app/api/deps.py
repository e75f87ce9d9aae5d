from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import async_session_maker
from app.models import User
from app.services.identity import authenticate


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


DbSession = Annotated[AsyncSession, Depends(get_db)]

basic_auth = HTTPBasic(realm="fitness-tracker")
optional_basic_auth = HTTPBasic(realm="fitness-tracker", auto_error=False)


async def _authenticate_or_401(db: AsyncSession, credentials: HTTPBasicCredentials) -> User:
    user = await authenticate(db, credentials.username, credentials.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Basic"},
        )
    return user


async def get_current_user(
    db: DbSession,
    credentials: Annotated[HTTPBasicCredentials, Depends(basic_auth)],
) -> User:
    """Authenticated user from HTTP Basic credentials."""
    return await _authenticate_or_401(db, credentials)


async def get_optional_user(
    db: DbSession,
    credentials: Annotated[HTTPBasicCredentials | None, Depends(optional_basic_auth)],
) -> User | None:
    """Like get_current_user, but anonymous callers get None instead of a 401."""
    if credentials is None:
        return None
    return await _authenticate_or_401(db, credentials)


async def get_current_principal(current_user: Annotated[User, Depends(get_current_user)]) -> str:
    """Name of the authenticated principal, the ownership key for workout logs."""
    return current_user.username


CurrentUser = Annotated[User, Depends(get_current_user)]
OptionalUser = Annotated[User | None, Depends(get_optional_user)]
CurrentPrincipal = Annotated[str, Depends(get_current_principal)]
