"""
task_manager.services.users

User lifecycle service (transaction owner for user writes).

Responsibilities:
- Register users with hashed passwords and unique emails.
- Apply partial updates, re-hashing passwords when supplied.
- Refuse to delete users that are still assigned to tasks.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from task_manager.auth.passwords import hash_password
from task_manager.db.models import User
from task_manager.db.repositories.tasks import TaskRepo
from task_manager.db.repositories.users import UserRepo
from task_manager.errors import DuplicateEmailError, ResourceConflictError, ResourceNotFoundError
from task_manager.observability.logging import get_logger
from task_manager.schemas.users import UserCreate, UserUpdate

log = get_logger(__name__)


class UserService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._users = UserRepo(session)
        self._tasks = TaskRepo(session)

    async def list_users(self) -> list[User]:
        return await self._users.list_all()

    async def get_user(self, user_id: int) -> User:
        user = await self._users.get(user_id)
        if user is None:
            raise ResourceNotFoundError(f"User not found with id: {user_id}")
        return user

    async def create_user(self, data: UserCreate) -> User:
        if await self._users.exists_by_email(data.email):
            raise DuplicateEmailError(f"User with email already exists: {data.email}")

        user = await self._users.create(
            email=data.email,
            password_digest=hash_password(data.password),
            first_name=data.first_name,
            last_name=data.last_name,
        )
        await self._session.commit()
        log.info("user.created", user_id=user.id)
        return user

    async def update_user(self, user_id: int, data: UserUpdate) -> User:
        user = await self.get_user(user_id)
        fields = data.model_fields_set

        if "email" in fields and data.email is not None and data.email != user.email:
            if await self._users.exists_by_email(data.email):
                raise DuplicateEmailError(f"User with email already exists: {data.email}")
            user.email = data.email
        if "first_name" in fields:
            user.first_name = data.first_name
        if "last_name" in fields:
            user.last_name = data.last_name
        if data.password:
            user.password_digest = hash_password(data.password)

        await self._session.flush()
        await self._session.commit()
        log.info("user.updated", user_id=user.id, fields=sorted(fields))
        return user

    async def delete_user(self, user_id: int) -> None:
        user = await self.get_user(user_id)
        if await self._tasks.exists_by_assignee(user_id):
            raise ResourceConflictError(
                f"Cannot delete user with id {user_id} because they have assigned tasks. "
                "Please reassign or delete the tasks first."
            )
        await self._users.delete(user)
        await self._session.commit()
        log.info("user.deleted", user_id=user_id)
