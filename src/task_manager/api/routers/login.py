from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from task_manager.api.deps import db_session, jwt_config_dep
from task_manager.auth.jwt import JwtConfig
from task_manager.schemas.auth import LoginRequest
from task_manager.services.auth import AuthService

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_class=PlainTextResponse)
async def login(
    body: LoginRequest,
    session: AsyncSession = Depends(db_session),
    jwt_cfg: JwtConfig = Depends(jwt_config_dep),
) -> str:
    # The raw token is the whole response body; clients send it back as `Bearer <token>`.
    return await AuthService(session=session, jwt_cfg=jwt_cfg).login(
        email=body.username, password=body.password
    )
