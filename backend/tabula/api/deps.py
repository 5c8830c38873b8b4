"""Route dependencies: the request session and the authenticated caller."""

from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from tabula.core.security import decode_access_token
from tabula.db.models.user import User
from tabula.db.session import get_db as _get_db
from tabula.repositories import users as user_repository

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async for session in _get_db():
        yield session


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Resolve the bearer token to an active user.

    Missing, malformed, expired or tampered tokens and tokens whose subject
    is not an active user all answer 401.
    """
    if credentials is None:
        raise _unauthorized("Authentication credentials were not provided")

    claims = decode_access_token(credentials.credentials)
    subject = (claims or {}).get("sub")
    if not isinstance(subject, str) or not (subject.isascii() and subject.isdigit()):
        raise _unauthorized("Invalid or expired token")

    user = await user_repository.get_active_user_by_id(db, int(subject))
    if user is None:
        raise _unauthorized("Invalid or inactive user")
    return user


async def get_owner_id(user: User = Depends(get_current_user)) -> int:
    """Owner id every table and record operation is scoped to."""
    return user.id
