from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from task_manager.db.models import User, UserRole


class UserRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        *,
        email: str,
        password_digest: str,
        first_name: str | None = None,
        last_name: str | None = None,
        role: UserRole = UserRole.user,
    ) -> User:
        user = User(
            email=email,
            password_digest=password_digest,
            first_name=first_name,
            last_name=last_name,
            role=role,
        )
        self._session.add(user)
        await self._session.flush()
        return user

    async def get(self, user_id: int) -> User | None:
        return await self._session.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == email)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        return await self.get_by_email(email) is not None

    async def list_all(self) -> list[User]:
        stmt = select(User).order_by(User.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def delete(self, user: User) -> None:
        await self._session.delete(user)
        await self._session.flush()
