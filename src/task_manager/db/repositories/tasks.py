"""
task_manager.db.repositories.tasks

Repository for `Task` entities.

Responsibilities:
- Create, fetch and delete tasks.
- Answer reference checks used before deleting users and statuses.
- Run the combined list filter (title substring, assignee, status slug, label).
"""

from __future__ import annotations

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from task_manager.db.models import Label, Task, TaskStatus, User


class TaskRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        *,
        name: str,
        task_status: TaskStatus,
        index: int | None = None,
        description: str | None = None,
        assignee: User | None = None,
        labels: list[Label] | None = None,
    ) -> Task:
        task = Task(
            name=name,
            index=index,
            description=description,
            task_status=task_status,
            assignee=assignee,
            labels=list(labels or []),
        )
        self._session.add(task)
        await self._session.flush()
        return task

    async def get(self, task_id: int) -> Task | None:
        return await self._session.get(Task, task_id)

    async def filter(
        self,
        *,
        title_cont: str | None = None,
        assignee_id: int | None = None,
        status_slug: str | None = None,
        label_id: int | None = None,
    ) -> list[Task]:
        stmt = select(Task)
        if title_cont:
            # `%` and `_` in the query are literal characters, not LIKE wildcards.
            stmt = stmt.where(Task.name.icontains(title_cont, autoescape=True))
        if assignee_id is not None:
            stmt = stmt.where(Task.assignee_id == assignee_id)
        if status_slug:
            stmt = stmt.join(Task.task_status).where(TaskStatus.slug == status_slug)
        if label_id is not None:
            stmt = stmt.where(Task.labels.any(Label.id == label_id))
        stmt = stmt.order_by(Task.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def exists_by_assignee(self, user_id: int) -> bool:
        stmt = select(exists().where(Task.assignee_id == user_id))
        return bool((await self._session.execute(stmt)).scalar())

    async def exists_by_status(self, status_id: int) -> bool:
        stmt = select(exists().where(Task.task_status_id == status_id))
        return bool((await self._session.execute(stmt)).scalar())

    async def delete(self, task: Task) -> None:
        await self._session.delete(task)
        await self._session.flush()
