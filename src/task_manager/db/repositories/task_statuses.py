from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from task_manager.db.models import TaskStatus


class TaskStatusRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, name: str, slug: str) -> TaskStatus:
        status = TaskStatus(name=name, slug=slug)
        self._session.add(status)
        await self._session.flush()
        return status

    async def get(self, status_id: int) -> TaskStatus | None:
        return await self._session.get(TaskStatus, status_id)

    async def get_by_slug(self, slug: str) -> TaskStatus | None:
        stmt = select(TaskStatus).where(TaskStatus.slug == slug)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def get_by_name(self, name: str) -> TaskStatus | None:
        stmt = select(TaskStatus).where(TaskStatus.name == name)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def list_all(self) -> list[TaskStatus]:
        stmt = select(TaskStatus).order_by(TaskStatus.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def delete(self, status: TaskStatus) -> None:
        await self._session.delete(status)
        await self._session.flush()
