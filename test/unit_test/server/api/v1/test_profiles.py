"""Tests for the profile endpoints."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestGetProfile:
    async def test_profile_created_on_first_access(self, client: AsyncClient):
        response = await client.get("/api/v1/profiles/me")
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "user-alice"
        assert data["email"] == "alice@example.com"
        assert data["full_name"] == "Alice Designer"

    async def test_profile_is_reused(self, client: AsyncClient):
        first = (await client.get("/api/v1/profiles/me")).json()
        second = (await client.get("/api/v1/profiles/me")).json()
        assert first["created_at"] == second["created_at"]

    async def test_requires_auth(self, app_client: AsyncClient):
        response = await app_client.get("/api/v1/profiles/me")
        assert response.status_code == 401


class TestUpdateProfile:
    async def test_partial_update(self, client: AsyncClient):
        response = await client.patch("/api/v1/profiles/me", json={"avatarUrl": "https://cdn.example.com/a.png"})
        assert response.status_code == 200
        data = response.json()
        assert data["avatar_url"] == "https://cdn.example.com/a.png"
        # Untouched field keeps its value
        assert data["full_name"] == "Alice Designer"

    async def test_snake_case_body_is_accepted(self, client: AsyncClient):
        response = await client.patch("/api/v1/profiles/me", json={"full_name": "Alice D."})
        assert response.status_code == 200
        assert response.json()["full_name"] == "Alice D."
