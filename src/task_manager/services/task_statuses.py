from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from task_manager.db.models import TaskStatus
from task_manager.db.repositories.task_statuses import TaskStatusRepo
from task_manager.db.repositories.tasks import TaskRepo
from task_manager.errors import ResourceConflictError, ResourceNotFoundError
from task_manager.observability.logging import get_logger
from task_manager.schemas.task_statuses import TaskStatusCreate, TaskStatusUpdate

log = get_logger(__name__)


class TaskStatusService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._statuses = TaskStatusRepo(session)
        self._tasks = TaskRepo(session)

    async def list_statuses(self) -> list[TaskStatus]:
        return await self._statuses.list_all()

    async def get_status(self, status_id: int) -> TaskStatus:
        status = await self._statuses.get(status_id)
        if status is None:
            raise ResourceNotFoundError(f"TaskStatus not found with id: {status_id}")
        return status

    async def create_status(self, data: TaskStatusCreate) -> TaskStatus:
        await self._ensure_unique(name=data.name, slug=data.slug, own_id=None)
        status = await self._statuses.create(name=data.name, slug=data.slug)
        await self._session.commit()
        log.info("task_status.created", task_status_id=status.id, slug=status.slug)
        return status

    async def update_status(self, status_id: int, data: TaskStatusUpdate) -> TaskStatus:
        status = await self.get_status(status_id)
        await self._ensure_unique(name=data.name, slug=data.slug, own_id=status_id)

        if data.name is not None:
            status.name = data.name
        if data.slug is not None:
            status.slug = data.slug

        await self._session.flush()
        await self._session.commit()
        log.info("task_status.updated", task_status_id=status.id)
        return status

    async def delete_status(self, status_id: int) -> None:
        status = await self.get_status(status_id)
        if await self._tasks.exists_by_status(status_id):
            raise ResourceConflictError(
                f"Cannot delete task status with id {status_id} because there are tasks "
                "with this status. Please update or delete the tasks first."
            )
        await self._statuses.delete(status)
        await self._session.commit()
        log.info("task_status.deleted", task_status_id=status_id)

    async def _ensure_unique(self, *, name: str | None, slug: str | None, own_id: int | None) -> None:
        if name is not None:
            existing = await self._statuses.get_by_name(name)
            if existing is not None and existing.id != own_id:
                raise ResourceConflictError(f"TaskStatus with name '{name}' already exists")
        if slug is not None:
            existing = await self._statuses.get_by_slug(slug)
            if existing is not None and existing.id != own_id:
                raise ResourceConflictError(f"TaskStatus with slug '{slug}' already exists")
