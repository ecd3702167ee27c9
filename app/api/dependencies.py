"""FastAPI dependencies for dependency injection."""

from typing import AsyncGenerator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import UnauthenticatedError
from app.core.security import decode_access_token
from app.db.base import get_session_factory
from app.db.models.user import User
from app.services.user import UserService

bearer_scheme = HTTPBearer(auto_error=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session for request with auto-commit/rollback."""
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the caller from the bearer token.

    Missing or invalid tokens raise UnauthenticatedError; suspended accounts
    raise ForbiddenError.
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise UnauthenticatedError("Access token required")
    user_id = decode_access_token(credentials.credentials)
    return await UserService(db).resolve(user_id)
