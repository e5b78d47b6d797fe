"""
task_manager.api.routers.health

Welcome, liveness and readiness endpoints (all public).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from task_manager.api.deps import db_session

router = APIRouter()

WELCOME_TEXT = "Welcome to Task Manager!"


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def welcome() -> str:
    return WELCOME_TEXT


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, str]:
    await session.execute(text("SELECT 1"))
    return {"status": "ready"}
