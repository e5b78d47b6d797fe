"""
task_manager.auth.deps

FastAPI dependency functions for authentication and authorization.

Responsibilities:
- Convert a bearer token into a typed `Principal`.
- Resolve the `User` behind the token.
- Enforce "admin or the user itself" on per-user operations.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_401_UNAUTHORIZED

from task_manager.api.deps import db_session, jwt_config_dep
from task_manager.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate
from task_manager.auth.models import Principal
from task_manager.db.models import User
from task_manager.db.repositories.users import UserRepo
from task_manager.errors import AccessDeniedError

_bearer = HTTPBearer(auto_error=False)

_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def get_principal(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    jwt_cfg: JwtConfig = Depends(jwt_config_dep),
) -> Principal:
    if creds is None or not creds.credentials:
        raise HTTPException(
            status_code=HTTP_401_UNAUTHORIZED, detail="Missing bearer token", headers=_CHALLENGE
        )

    try:
        payload = decode_and_validate(cfg=jwt_cfg, token=creds.credentials)
    except JwtValidationError as e:
        raise HTTPException(
            status_code=HTTP_401_UNAUTHORIZED, detail=f"Invalid token: {e}", headers=_CHALLENGE
        ) from e

    subject = str(payload.get("sub", ""))
    roles_raw = payload.get("roles", [])
    if not subject:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Invalid token subject")
    if not isinstance(roles_raw, list):
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Invalid token roles")

    return Principal(subject=subject, roles=frozenset(str(r) for r in roles_raw))


async def get_current_user(
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
) -> User:
    # A valid signature is not enough: the account must still exist.
    user = await UserRepo(session).get_by_email(principal.subject)
    if user is None:
        raise HTTPException(
            status_code=HTTP_401_UNAUTHORIZED, detail="Unknown token subject", headers=_CHALLENGE
        )
    return user


def ensure_self_or_admin(current: User, target_user_id: int) -> None:
    if current.is_admin or current.id == target_user_id:
        return
    raise AccessDeniedError()
