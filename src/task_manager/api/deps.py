"""
task_manager.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Expose the Settings the app was built with (not the process-wide cached instance).
- Derive the JWT configuration shared by login and token validation.
- Provide request-scoped DB sessions from the sessionmaker created in the app lifespan.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from task_manager.auth.jwt import JwtConfig
from task_manager.settings import Settings


def settings_dep(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[attr-defined]


def jwt_config_dep(settings: Settings = Depends(settings_dep)) -> JwtConfig:
    return JwtConfig.from_settings(settings)


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # One session per request, shared by auth and the route. Services own commits.
    async with session_factory() as session:
        yield session
