from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from task_manager.db.models import Label, task_labels


class LabelRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, name: str) -> Label:
        label = Label(name=name)
        self._session.add(label)
        await self._session.flush()
        return label

    async def get(self, label_id: int) -> Label | None:
        return await self._session.get(Label, label_id)

    async def get_by_name(self, name: str) -> Label | None:
        # Exact match: "bug" and "BUG" are distinct labels.
        stmt = select(Label).where(Label.name == name)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def get_many(self, label_ids: Iterable[int]) -> list[Label]:
        ids = set(label_ids)
        if not ids:
            return []
        stmt = select(Label).where(Label.id.in_(ids)).order_by(Label.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def list_all(self) -> list[Label]:
        stmt = select(Label).order_by(Label.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def has_tasks(self, label_id: int) -> bool:
        stmt = select(exists().where(task_labels.c.label_id == label_id))
        return bool((await self._session.execute(stmt)).scalar())

    async def delete(self, label: Label) -> None:
        await self._session.delete(label)
        await self._session.flush()
