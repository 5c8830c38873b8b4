"""Tests for resolving the bearer token to the calling user."""

from __future__ import annotations

import pytest
from sqlalchemy import update

from tabula.core.security import create_access_token
from tabula.db.models import User
from tabula.repositories import users as user_repository
from tests.helpers import API, register


@pytest.mark.asyncio
async def test_missing_credentials_ask_for_bearer(client):
    response = await client.get(f"{API}/tables")
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
    assert response.json()["detail"] == "Authentication credentials were not provided"


@pytest.mark.asyncio
@pytest.mark.parametrize("subject", ["not-a-number", "١٢", None])
async def test_token_without_numeric_subject_rejected(client, subject):
    claims = {"email": "ada@example.com"}
    if subject is not None:
        claims["sub"] = subject
    headers = {"Authorization": f"Bearer {create_access_token(claims)}"}

    response = await client.get(f"{API}/tables", headers=headers)
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid or expired token"


@pytest.mark.asyncio
async def test_deactivated_account_loses_access(client, session_factory):
    headers = await register(client, "ada@example.com")
    assert (await client.get(f"{API}/tables", headers=headers)).status_code == 200

    async with session_factory() as session:
        await session.execute(
            update(User).where(User.email == "ada@example.com").values(is_active=False)
        )
        await session.commit()

    response = await client.get(f"{API}/tables", headers=headers)
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid or inactive user"


@pytest.mark.asyncio
async def test_tables_are_scoped_to_the_token_owner(client):
    ada = await register(client, "ada@example.com")
    bob = await register(client, "bob@example.com")
    await client.post(f"{API}/tables", json={"name": "Ada's", "fields": []}, headers=ada)

    assert [t["name"] for t in (await client.get(f"{API}/tables", headers=ada)).json()] == ["Ada's"]
    assert (await client.get(f"{API}/tables", headers=bob)).json() == []


@pytest.mark.asyncio
async def test_login_stamps_last_login(db):
    user = await user_repository.create_user(db, email="  Ada@Example.com ", password="secret123")
    assert user.email == "ada@example.com"
    assert user.last_login_at is None

    found = await user_repository.authenticate_user(db, email="ADA@example.com", password="secret123")
    assert found is user
    assert await user_repository.authenticate_user(db, email="ada@example.com", password="nope") is None

    await user_repository.record_login(db, user)
    assert user.last_login_at is not None
