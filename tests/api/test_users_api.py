"""HTTP tests for /api/users over an in-memory repository."""

from datetime import datetime

import pytest
from fastapi import FastAPI
from httpx import AsyncClient

from userapi.api.dependencies import get_user_service
from userapi.domain.exceptions import StoreException

ADA = {"name": "Ada Lovelace", "email": "ada@example.com"}


def _error(response) -> dict:
    body = response.json()
    assert body["success"] is False
    return body["error"]


async def _create(client: AsyncClient, payload: dict = ADA) -> dict:
    response = await client.post("/api/users", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestList:
    async def test_empty_list_is_an_array(self, client: AsyncClient) -> None:
        response = await client.get("/api/users")
        assert response.status_code == 200
        assert response.json() == {"success": True, "data": []}

    async def test_newest_first(self, client: AsyncClient) -> None:
        await _create(client, ADA)
        await _create(client, {"name": "Alan Turing", "email": "alan@example.com"})
        data = (await client.get("/api/users")).json()["data"]
        assert [u["name"] for u in data] == ["Alan Turing", "Ada Lovelace"]


class TestCreate:
    async def test_created_user_shape(self, client: AsyncClient) -> None:
        user = await _create(client)
        assert set(user) == {"id", "name", "email", "created_at", "updated_at"}
        assert user["id"] == 1
        assert user["name"] == "Ada Lovelace"
        assert user["created_at"] == user["updated_at"]

    async def test_input_is_sanitized(self, client: AsyncClient) -> None:
        user = await _create(
            client, {"name": "  Ada   Lovelace ", "email": " ada@example.com "}
        )
        assert user["name"] == "Ada Lovelace"
        assert user["email"] == "ada@example.com"

    async def test_duplicate_email_conflict(self, client: AsyncClient) -> None:
        await _create(client)
        response = await client.post(
            "/api/users", json={"name": "Someone Else", "email": "ada@example.com"}
        )
        assert response.status_code == 409
        assert _error(response) == {
            "error": "Conflict",
            "message": "Email already exists",
            "code": 409,
        }

    async def test_invalid_format_reports_all_errors(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/users", json={"name": "J", "email": "not-an-email"}
        )
        assert response.status_code == 400
        message = _error(response)["message"]
        assert "Name must be 2-100 characters" in message
        assert "Email format is invalid" in message

    async def test_blank_name_is_required(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/users", json={"name": "   ", "email": "ada@example.com"}
        )
        assert response.status_code == 400
        assert _error(response)["message"] == "Name is required"

    async def test_missing_fields(self, client: AsyncClient) -> None:
        response = await client.post("/api/users", json={"name": "Ada"})
        assert response.status_code == 400
        assert _error(response)["message"] == "Name and email are required"

    async def test_malformed_json(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/users",
            content=b'{"name": "Ada",',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert _error(response) == {
            "error": "Bad Request",
            "message": "Invalid JSON payload",
            "code": 400,
        }

    async def test_email_longer_than_column_rejected(self, client: AsyncClient) -> None:
        email = "a" * 89 + "@example.com"
        response = await client.post("/api/users", json={"name": "Ada", "email": email})
        assert response.status_code == 400
        assert _error(response)["message"] == "Email must be at most 100 characters"

        response = await client.get("/api/users")
        assert response.json()["data"] == []

    async def test_wrong_type(self, client: AsyncClient) -> None:
        response = await client.post("/api/users", json={"name": 42, "email": "a@b.co"})
        assert response.status_code == 400
        assert _error(response)["message"] == "Invalid JSON payload"


class TestGet:
    async def test_get_existing(self, client: AsyncClient) -> None:
        created = await _create(client)
        response = await client.get(f"/api/users/{created['id']}")
        assert response.status_code == 200
        assert response.json() == {"success": True, "data": created}

    async def test_get_missing(self, client: AsyncClient) -> None:
        response = await client.get("/api/users/999")
        assert response.status_code == 404
        assert _error(response) == {
            "error": "Not Found",
            "message": "User not found",
            "code": 404,
        }

    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    async def test_id_beyond_32_bits_is_not_found(
        self, client: AsyncClient, method: str
    ) -> None:
        body = ADA if method == "PUT" else None
        response = await client.request(method, "/api/users/2147483648", json=body)
        assert response.status_code == 404
        assert _error(response)["message"] == "User not found"

    @pytest.mark.parametrize("raw_id", ["abc", "1.5"])
    async def test_invalid_id(self, client: AsyncClient, raw_id: str) -> None:
        response = await client.get(f"/api/users/{raw_id}")
        assert response.status_code == 400
        assert _error(response)["message"] == "Invalid user ID"


class TestUpdate:
    async def test_update_name_keeping_email(self, client: AsyncClient) -> None:
        created = await _create(client)
        response = await client.put(
            f"/api/users/{created['id']}",
            json={"name": "Augusta Ada King", "email": "ada@example.com"},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Augusta Ada King"
        assert data["created_at"] == created["created_at"]
        assert datetime.fromisoformat(data["updated_at"]) > datetime.fromisoformat(
            created["updated_at"]
        )

    async def test_update_to_taken_email(self, client: AsyncClient) -> None:
        await _create(client)
        bob = await _create(client, {"name": "Bob", "email": "bob@example.com"})
        response = await client.put(
            f"/api/users/{bob['id']}", json={"name": "Bob", "email": "ada@example.com"}
        )
        assert response.status_code == 409

    async def test_update_missing(self, client: AsyncClient) -> None:
        response = await client.put("/api/users/999", json=ADA)
        assert response.status_code == 404

    async def test_update_validates_before_lookup(self, client: AsyncClient) -> None:
        response = await client.put("/api/users/999", json={"name": "A", "email": "x"})
        assert response.status_code == 400

    async def test_update_invalid_id(self, client: AsyncClient) -> None:
        response = await client.put("/api/users/abc", json=ADA)
        assert response.status_code == 400
        assert _error(response)["message"] == "Invalid user ID"


class TestDelete:
    async def test_delete_then_get(self, client: AsyncClient) -> None:
        created = await _create(client)
        response = await client.delete(f"/api/users/{created['id']}")
        assert response.status_code == 204
        assert response.content == b""

        response = await client.get(f"/api/users/{created['id']}")
        assert response.status_code == 404

    async def test_delete_missing(self, client: AsyncClient) -> None:
        response = await client.delete("/api/users/999")
        assert response.status_code == 404
        assert _error(response)["message"] == "User not found"

    async def test_email_reusable_after_delete(self, client: AsyncClient) -> None:
        created = await _create(client)
        await client.delete(f"/api/users/{created['id']}")
        again = await _create(client)
        assert again["id"] != created["id"]


class TestFailures:
    async def test_unknown_route_uses_envelope(self, client: AsyncClient) -> None:
        response = await client.get("/api/nope")
        assert response.status_code == 404
        assert _error(response)["code"] == 404

    async def test_wrong_method(self, client: AsyncClient) -> None:
        response = await client.patch("/api/users/1", json=ADA)
        assert response.status_code == 405
        assert _error(response)["error"] == "Method Not Allowed"

    async def test_store_failure_is_generic_500(self, app: FastAPI, client: AsyncClient) -> None:
        class BrokenService:
            async def get_all_users(self):
                raise StoreException("Failed to retrieve users")

        app.dependency_overrides[get_user_service] = lambda: BrokenService()
        response = await client.get("/api/users")
        assert response.status_code == 500
        assert _error(response) == {
            "error": "Internal Server Error",
            "message": "Failed to retrieve users",
            "code": 500,
        }

    async def test_unexpected_error_is_recovered(self, app: FastAPI, client: AsyncClient) -> None:
        class ExplodingService:
            async def get_user_by_id(self, user_id: int):
                raise RuntimeError("secret internals")

        app.dependency_overrides[get_user_service] = lambda: ExplodingService()
        response = await client.get("/api/users/1")
        assert response.status_code == 500
        assert _error(response)["message"] == "Internal server error"
        assert "secret" not in response.text

    async def test_without_lifespan_database_is_unavailable(self, app: FastAPI, client: AsyncClient) -> None:
        app.dependency_overrides.clear()
        response = await client.get("/api/users")
        assert response.status_code == 500
        assert _error(response)["message"] == "Service unavailable"
