"""
task_manager.services.tasks

Task lifecycle service.

Responsibilities:
- Resolve task references (status by slug, assignee by id, labels by id).
- Create tasks and apply partial updates.
- Run the combined list filter.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from task_manager.db.models import Label, Task, TaskStatus, User
from task_manager.db.repositories.labels import LabelRepo
from task_manager.db.repositories.task_statuses import TaskStatusRepo
from task_manager.db.repositories.tasks import TaskRepo
from task_manager.db.repositories.users import UserRepo
from task_manager.errors import ResourceNotFoundError
from task_manager.observability.logging import get_logger
from task_manager.schemas.tasks import TaskCreate, TaskFilterParams, TaskUpdate

log = get_logger(__name__)

# `assignee_id: 0` in an update means "unassign", same as an explicit null.
# On create there is no assignee to clear, so 0 is looked up like any other id.
UNASSIGNED_ID = 0


class TaskService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._tasks = TaskRepo(session)
        self._statuses = TaskStatusRepo(session)
        self._users = UserRepo(session)
        self._labels = LabelRepo(session)

    async def list_tasks(self, params: TaskFilterParams) -> list[Task]:
        return await self._tasks.filter(
            title_cont=params.normalized_title,
            assignee_id=params.assignee_id,
            status_slug=params.normalized_status,
            label_id=params.label_id,
        )

    async def get_task(self, task_id: int) -> Task:
        task = await self._tasks.get(task_id)
        if task is None:
            raise ResourceNotFoundError(f"Task not found with id: {task_id}")
        return task

    async def create_task(self, data: TaskCreate) -> Task:
        status = await self._resolve_status(data.status)
        assignee = await self._resolve_assignee(data.assignee_id)
        labels = await self._resolve_labels(data.task_label_ids or [])

        task = await self._tasks.create(
            name=data.title,
            index=data.index,
            description=data.content,
            task_status=status,
            assignee=assignee,
            labels=labels,
        )
        await self._session.commit()
        log.info("task.created", task_id=task.id, status=status.slug)
        return task

    async def update_task(self, task_id: int, data: TaskUpdate) -> Task:
        task = await self.get_task(task_id)
        fields = data.model_fields_set

        if data.title is not None:
            task.name = data.title
        if "content" in fields:
            task.description = data.content
        if "index" in fields:
            task.index = data.index
        if data.status is not None:
            task.task_status = await self._resolve_status(data.status)
        if "assignee_id" in fields:
            unassign = data.assignee_id is None or data.assignee_id == UNASSIGNED_ID
            task.assignee = None if unassign else await self._resolve_assignee(data.assignee_id)
        if data.task_label_ids is not None:
            task.labels = await self._resolve_labels(data.task_label_ids)

        await self._session.flush()
        await self._session.commit()
        log.info("task.updated", task_id=task.id, fields=sorted(fields))
        return task

    async def delete_task(self, task_id: int) -> None:
        task = await self.get_task(task_id)
        await self._tasks.delete(task)
        await self._session.commit()
        log.info("task.deleted", task_id=task_id)

    async def _resolve_status(self, slug: str) -> TaskStatus:
        status = await self._statuses.get_by_slug(slug)
        if status is None:
            raise ResourceNotFoundError(f"TaskStatus not found with slug: {slug}")
        return status

    async def _resolve_assignee(self, assignee_id: int | None) -> User | None:
        if assignee_id is None:
            return None
        user = await self._users.get(assignee_id)
        if user is None:
            raise ResourceNotFoundError(f"User not found with id: {assignee_id}")
        return user

    async def _resolve_labels(self, label_ids: list[int]) -> list[Label]:
        labels = await self._labels.get_many(label_ids)
        missing = sorted(set(label_ids) - {label.id for label in labels})
        if missing:
            raise ResourceNotFoundError(f"Label not found with id: {missing[0]}")
        return labels
