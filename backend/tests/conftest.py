"""
Pytest configuration for the Tabula backend.

Provides fixtures for:
- An in-memory SQLite database (aiosqlite) with all tables created
- Request-scoped sessions mirroring the app's `get_db` dependency
- Users that own (or try to reach) tables and records
- An httpx client wired to the FastAPI app
"""

from __future__ import annotations

import os

# Must be set before tabula settings are imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("APP_ENV", "test")

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from tabula.api.deps import get_db
from tabula.db.models import Base, User
from tabula.main import app
from tabula.repositories import users as user_repository


@pytest_asyncio.fixture
async def engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def owner(db: AsyncSession) -> User:
    return await user_repository.create_user(db, email="owner@example.com", password="secret123")


@pytest_asyncio.fixture
async def intruder(db: AsyncSession) -> User:
    return await user_repository.create_user(db, email="intruder@example.com", password="secret123")


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app, sharing the test database."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        yield http
    app.dependency_overrides.clear()
