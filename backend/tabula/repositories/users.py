"""
Account data access. Functions receive the session explicitly, flush and
never commit. Emails are stored and looked up in normalized form.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tabula.core.security import hash_password, verify_password
from tabula.db.models.base import utcnow
from tabula.db.models.user import User


def normalize_email(email: str) -> str:
    return email.strip().lower()


async def create_user(db: AsyncSession, *, email: str, password: str) -> User:
    user = User(email=normalize_email(email), hashed_password=hash_password(password))
    db.add(user)
    await db.flush()
    return user


async def get_active_user_by_id(db: AsyncSession, user_id: int) -> User | None:
    result = await db.execute(select(User).where(User.id == user_id, User.is_active.is_(True)))
    return result.scalar_one_or_none()


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == normalize_email(email)))
    return result.scalar_one_or_none()


async def authenticate_user(db: AsyncSession, *, email: str, password: str) -> User | None:
    """Return the active account matching the credentials, or None."""
    user = await get_user_by_email(db, email)
    if user is not None and user.is_active and verify_password(password, user.hashed_password):
        return user
    return None


async def record_login(db: AsyncSession, user: User) -> User:
    """Stamp the login time on the account and return it."""
    user.last_login_at = utcnow()
    await db.flush()
    return user
