"""
tests.conftest

Shared fixtures: an app bound to a throwaway SQLite file, an in-process HTTP
client, and authenticated header sets for the seeded admin and a regular user.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import httpx
import pytest
from fastapi import FastAPI

from task_manager.api.app import create_app
from task_manager.settings import Settings

ADMIN_EMAIL = "hexlet@example.com"
ADMIN_PASSWORD = "qwerty"

USER_EMAIL = "john.doe@example.com"
USER_PASSWORD = "password123"


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        jwt_secret="test-secret",
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        sentry_dsn=None,
        log_json=False,
        log_level="WARNING",
    )


@pytest.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    app = create_app(settings=settings)
    # httpx ASGITransport does not run the lifespan; enter it explicitly.
    async with app.router.lifespan_context(app):
        yield app


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def login(client: httpx.AsyncClient, email: str, password: str) -> dict[str, str]:
    r = await client.post("/api/login", json={"username": email, "password": password})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.text}"}


async def register(
    client: httpx.AsyncClient,
    email: str,
    password: str = USER_PASSWORD,
    first_name: str = "John",
    last_name: str = "Doe",
) -> dict:
    r = await client.post(
        "/api/users",
        json={"email": email, "password": password, "firstName": first_name, "lastName": last_name},
    )
    assert r.status_code == 201, r.text
    return r.json()


@pytest.fixture
async def admin_headers(client: httpx.AsyncClient) -> dict[str, str]:
    return await login(client, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
async def user(client: httpx.AsyncClient) -> dict:
    return await register(client, USER_EMAIL)


@pytest.fixture
async def user_headers(client: httpx.AsyncClient, user: dict) -> dict[str, str]:
    return await login(client, USER_EMAIL, USER_PASSWORD)
