"""
tests.test_users

User registration, reads, ownership-restricted updates/deletes.
"""

from __future__ import annotations

from datetime import date

import httpx

from .conftest import ADMIN_EMAIL, USER_EMAIL, login, register


async def test_get_user_by_id(
    client: httpx.AsyncClient, user: dict, user_headers: dict[str, str]
) -> None:
    r = await client.get(f"/api/users/{user['id']}", headers=user_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == user["id"]
    assert body["email"] == USER_EMAIL
    assert body["firstName"] == "John"
    assert body["lastName"] == "Doe"
    assert date.fromisoformat(body["createdAt"]) <= date.fromisoformat(body["updatedAt"])
    assert "password" not in body
    assert "passwordDigest" not in body


async def test_missing_user_is_not_found(
    client: httpx.AsyncClient, user_headers: dict[str, str]
) -> None:
    r = await client.get("/api/users/999", headers=user_headers)
    assert r.status_code == 404
    assert r.json() == {"error": "User not found with id: 999"}


async def test_list_users_includes_seeded_admin(
    client: httpx.AsyncClient, user_headers: dict[str, str]
) -> None:
    r = await client.get("/api/users", headers=user_headers)
    assert r.status_code == 200
    emails = [u["email"] for u in r.json()]
    assert emails == [ADMIN_EMAIL, USER_EMAIL]
    assert r.headers["X-Total-Count"] == "2"
    assert "X-Total-Count" in r.headers["Access-Control-Expose-Headers"]


async def test_create_user(client: httpx.AsyncClient) -> None:
    r = await client.post(
        "/api/users",
        json={
            "email": "new@example.com",
            "firstName": "Jane",
            "lastName": "Smith",
            "password": "newpassword123",
        },
    )
    assert r.status_code == 201
    body = r.json()
    assert body["id"]
    assert body["email"] == "new@example.com"
    assert body["firstName"] == "Jane"
    assert body["createdAt"]
    assert "password" not in body


async def test_create_user_with_only_required_fields(client: httpx.AsyncClient) -> None:
    r = await client.post("/api/users", json={"email": "bare@example.com", "password": "abc"})
    assert r.status_code == 201
    assert r.json()["firstName"] is None


async def test_duplicate_email_is_bad_request(client: httpx.AsyncClient, user: dict) -> None:
    r = await client.post(
        "/api/users",
        json={"email": USER_EMAIL, "firstName": "Jane", "lastName": "Smith", "password": "pass123"},
    )
    assert r.status_code == 400
    assert r.json() == {"error": f"User with email already exists: {USER_EMAIL}"}


async def test_invalid_email_is_bad_request(client: httpx.AsyncClient) -> None:
    r = await client.post(
        "/api/users", json={"email": "invalid-email", "password": "validpassword123"}
    )
    assert r.status_code == 400
    assert "email" in r.json()


async def test_short_password_is_bad_request(client: httpx.AsyncClient) -> None:
    r = await client.post("/api/users", json={"email": "valid@example.com", "password": "pw"})
    assert r.status_code == 400
    assert "password" in r.json()


async def test_short_first_name_is_bad_request(client: httpx.AsyncClient) -> None:
    r = await client.post(
        "/api/users",
        json={"email": "valid@example.com", "password": "pass123", "firstName": "J"},
    )
    assert r.status_code == 400
    assert "firstName" in r.json()


async def test_update_own_profile_partially(
    client: httpx.AsyncClient, user: dict, user_headers: dict[str, str]
) -> None:
    r = await client.put(
        f"/api/users/{user['id']}",
        headers=user_headers,
        json={"email": "updated@example.com", "firstName": "UpdatedName"},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["email"] == "updated@example.com"
    assert body["firstName"] == "UpdatedName"
    assert body["lastName"] == "Doe"


async def test_update_password_allows_login_with_new_password(
    client: httpx.AsyncClient, user: dict, user_headers: dict[str, str]
) -> None:
    r = await client.put(
        f"/api/users/{user['id']}", headers=user_headers, json={"password": "newsecurepassword"}
    )
    assert r.status_code == 200
    assert r.json()["email"] == USER_EMAIL

    await login(client, USER_EMAIL, "newsecurepassword")
    r = await client.post("/api/login", json={"username": USER_EMAIL, "password": "password123"})
    assert r.status_code == 401


async def test_update_to_taken_email_is_bad_request(
    client: httpx.AsyncClient, user: dict, user_headers: dict[str, str]
) -> None:
    r = await client.put(
        f"/api/users/{user['id']}", headers=user_headers, json={"email": ADMIN_EMAIL}
    )
    assert r.status_code == 400


async def test_cannot_update_another_user(
    client: httpx.AsyncClient, user_headers: dict[str, str]
) -> None:
    other = await register(client, "other@example.com")
    r = await client.put(
        f"/api/users/{other['id']}", headers=user_headers, json={"firstName": "Hacked"}
    )
    assert r.status_code == 403
    assert r.json() == {"error": "Access denied"}


async def test_admin_can_update_any_user(
    client: httpx.AsyncClient, user: dict, admin_headers: dict[str, str]
) -> None:
    r = await client.put(
        f"/api/users/{user['id']}", headers=admin_headers, json={"lastName": "Admined"}
    )
    assert r.status_code == 200
    assert r.json()["lastName"] == "Admined"


async def test_delete_own_account(
    client: httpx.AsyncClient, user: dict, user_headers: dict[str, str], admin_headers: dict[str, str]
) -> None:
    r = await client.delete(f"/api/users/{user['id']}", headers=user_headers)
    assert r.status_code == 204

    r = await client.get(f"/api/users/{user['id']}", headers=admin_headers)
    assert r.status_code == 404


async def test_cannot_delete_another_user(
    client: httpx.AsyncClient, user_headers: dict[str, str]
) -> None:
    other = await register(client, "other@example.com")
    r = await client.delete(f"/api/users/{other['id']}", headers=user_headers)
    assert r.status_code == 403


async def test_cannot_delete_user_with_assigned_tasks(
    client: httpx.AsyncClient, user: dict, admin_headers: dict[str, str]
) -> None:
    r = await client.post(
        "/api/tasks",
        headers=admin_headers,
        json={"title": "Assigned", "status": "draft", "assignee_id": user["id"]},
    )
    assert r.status_code == 201

    r = await client.delete(f"/api/users/{user['id']}", headers=admin_headers)
    assert r.status_code == 409
    assert "assigned tasks" in r.json()["error"]


async def test_total_count_header_is_exposed_to_browsers(
    client: httpx.AsyncClient, user_headers: dict[str, str]
) -> None:
    r = await client.get(
        "/api/users", headers={**user_headers, "Origin": "http://localhost:5173"}
    )
    assert r.status_code == 200
    assert r.headers["Access-Control-Expose-Headers"] == "X-Total-Count"
