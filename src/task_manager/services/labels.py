from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from task_manager.db.models import Label
from task_manager.db.repositories.labels import LabelRepo
from task_manager.errors import ResourceConflictError, ResourceNotFoundError
from task_manager.observability.logging import get_logger
from task_manager.schemas.labels import LabelPayload

log = get_logger(__name__)


class LabelService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._labels = LabelRepo(session)

    async def list_labels(self) -> list[Label]:
        return await self._labels.list_all()

    async def get_label(self, label_id: int) -> Label:
        label = await self._labels.get(label_id)
        if label is None:
            raise ResourceNotFoundError(f"Label not found with id: {label_id}")
        return label

    async def create_label(self, data: LabelPayload) -> Label:
        if await self._labels.get_by_name(data.name) is not None:
            raise ResourceConflictError(f"Label with name '{data.name}' already exists")
        label = await self._labels.create(name=data.name)
        await self._session.commit()
        log.info("label.created", label_id=label.id)
        return label

    async def update_label(self, label_id: int, data: LabelPayload) -> Label:
        label = await self.get_label(label_id)
        existing = await self._labels.get_by_name(data.name)
        if existing is not None and existing.id != label_id:
            raise ResourceConflictError(f"Label with name '{data.name}' already exists")

        label.name = data.name
        await self._session.flush()
        await self._session.commit()
        log.info("label.updated", label_id=label.id)
        return label

    async def delete_label(self, label_id: int) -> None:
        label = await self.get_label(label_id)
        if await self._labels.has_tasks(label_id):
            raise ResourceConflictError(
                f"Cannot delete label with id: {label_id} because it has associated tasks"
            )
        await self._labels.delete(label)
        await self._session.commit()
        log.info("label.deleted", label_id=label_id)
