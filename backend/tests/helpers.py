"""Shared helpers for API tests."""

from __future__ import annotations

from httpx import AsyncClient

API = "/api/v1"


async def register(client: AsyncClient, email: str, password: str = "secret123") -> dict[str, str]:
    """Register a user and return bearer auth headers."""
    response = await client.post(f"{API}/auth/register", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
