"""
task_manager.api.routers.users

User endpoints.

Responsibilities:
- Public registration (`POST /api/users`).
- Authenticated reads.
- Updates/deletes restricted to the user itself or an administrator.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from task_manager.api.deps import db_session
from task_manager.api.routers.common import set_total_count
from task_manager.auth.deps import ensure_self_or_admin, get_current_user
from task_manager.db.models import User
from task_manager.schemas.users import UserCreate, UserResponse, UserUpdate
from task_manager.services.users import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get(
    "",
    response_model=list[UserResponse],
    dependencies=[Depends(get_current_user)],
)
async def list_users(
    response: Response,
    session: AsyncSession = Depends(db_session),
) -> list[UserResponse]:
    users = await UserService(session=session).list_users()
    set_total_count(response, len(users))
    return [UserResponse.from_model(u) for u in users]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    dependencies=[Depends(get_current_user)],
)
async def get_user(
    user_id: int,
    session: AsyncSession = Depends(db_session),
) -> UserResponse:
    user = await UserService(session=session).get_user(user_id)
    return UserResponse.from_model(user)


@router.post("", response_model=UserResponse, status_code=HTTP_201_CREATED)
async def create_user(
    body: UserCreate,
    session: AsyncSession = Depends(db_session),
) -> UserResponse:
    user = await UserService(session=session).create_user(body)
    return UserResponse.from_model(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    body: UserUpdate,
    current: User = Depends(get_current_user),
    session: AsyncSession = Depends(db_session),
) -> UserResponse:
    ensure_self_or_admin(current, user_id)
    user = await UserService(session=session).update_user(user_id, body)
    return UserResponse.from_model(user)


@router.delete("/{user_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    current: User = Depends(get_current_user),
    session: AsyncSession = Depends(db_session),
) -> None:
    ensure_self_or_admin(current, user_id)
    await UserService(session=session).delete_user(user_id)
