"""
Travel Diary Backend — /users Endpoint Tests
=============================================

What:  End-to-end tests through the ASGI app against a temporary SQLite file.
"""

import pytest
from unittest.mock import AsyncMock, patch

from travel_diary.exceptions import StorageFailureError


class TestListUsers:

    @pytest.mark.asyncio
    async def test_empty_database_returns_empty_array(self, test_client):
        response = await test_client.get("/users")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_lists_in_insertion_order(self, test_client):
        for name in ("alice", "bob", "carol"):
            await test_client.post("/users", json={"username": name, "email": f"{name}@x.com"})

        response = await test_client.get("/users")

        assert response.status_code == 200
        assert [u["username"] for u in response.json()] == ["alice", "bob", "carol"]

    @pytest.mark.asyncio
    async def test_storage_failure_is_500(self, test_client):
        with patch(
            "travel_diary.routes.users.user_service.list_users",
            AsyncMock(side_effect=StorageFailureError(message="disk I/O error")),
        ):
            response = await test_client.get("/users")

        assert response.status_code == 500
        assert response.json() == {"message": "disk I/O error"}


class TestCreateUser:

    @pytest.mark.asyncio
    async def test_create_returns_201_with_id(self, test_client, alice):
        response = await test_client.post("/users", json=alice)

        assert response.status_code == 201
        assert response.json() == {"id": 1, "username": "alice", "email": "a@x.com"}

    @pytest.mark.asyncio
    async def test_missing_email_is_400(self, test_client):
        response = await test_client.post("/users", json={"username": "alice"})

        assert response.status_code == 400
        assert "NOT NULL constraint failed: users.email" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_failed_insert_leaves_table_unchanged(self, test_client):
        await test_client.post("/users", json={"email": "a@x.com"})

        response = await test_client.get("/users")
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_malformed_json_is_400(self, test_client):
        response = await test_client.post(
            "/users",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert set(response.json()) == {"message"}

    @pytest.mark.asyncio
    async def test_field_types_are_not_checked(self, test_client):
        response = await test_client.post("/users", json={"username": 123, "email": "a@x.com"})

        assert response.status_code == 201
        assert response.json() == {"id": 1, "username": 123, "email": "a@x.com"}

        stored = await test_client.get("/users/1")
        assert stored.json()["username"] == "123"

    @pytest.mark.asyncio
    async def test_duplicate_usernames_allowed(self, test_client, alice):
        first = await test_client.post("/users", json=alice)
        second = await test_client.post("/users", json=alice)

        assert first.status_code == second.status_code == 201
        assert second.json()["id"] == first.json()["id"] + 1


class TestGetUser:

    @pytest.mark.asyncio
    async def test_round_trip(self, test_client):
        created = await test_client.post(
            "/users", json={"username": "zoë", "email": "zoe@example.org"}
        )
        user_id = created.json()["id"]

        response = await test_client.get(f"/users/{user_id}")

        assert response.status_code == 200
        assert response.json() == {"id": user_id, "username": "zoë", "email": "zoe@example.org"}

    @pytest.mark.asyncio
    async def test_unknown_id_is_404(self, test_client):
        response = await test_client.get("/users/999")

        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw_id", ["abc", "1.5", "-"])
    async def test_non_integer_id_is_404(self, test_client, alice, raw_id):
        await test_client.post("/users", json=alice)

        response = await test_client.get(f"/users/{raw_id}")

        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}
