"""
task_manager.api.routers.tasks

Task endpoints.

Responsibilities:
- CRUD over tasks for authenticated users.
- Expose the list filter as query parameters (`titleCont`, `assigneeId`, `status`, `labelId`).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from task_manager.api.deps import db_session
from task_manager.api.routers.common import set_total_count
from task_manager.auth.deps import get_current_user
from task_manager.schemas.tasks import TaskCreate, TaskFilterParams, TaskResponse, TaskUpdate
from task_manager.services.tasks import TaskService

router = APIRouter(
    prefix="/api/tasks",
    tags=["tasks"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    response: Response,
    title_cont: str | None = Query(default=None, alias="titleCont"),
    assignee_id: int | None = Query(default=None, alias="assigneeId"),
    status: str | None = Query(default=None),
    label_id: int | None = Query(default=None, alias="labelId"),
    session: AsyncSession = Depends(db_session),
) -> list[TaskResponse]:
    params = TaskFilterParams(
        title_cont=title_cont,
        assignee_id=assignee_id,
        status=status,
        label_id=label_id,
    )
    tasks = await TaskService(session=session).list_tasks(params)
    set_total_count(response, len(tasks))
    return [TaskResponse.from_model(t) for t in tasks]


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: int,
    session: AsyncSession = Depends(db_session),
) -> TaskResponse:
    task = await TaskService(session=session).get_task(task_id)
    return TaskResponse.from_model(task)


@router.post("", response_model=TaskResponse, status_code=HTTP_201_CREATED)
async def create_task(
    body: TaskCreate,
    session: AsyncSession = Depends(db_session),
) -> TaskResponse:
    task = await TaskService(session=session).create_task(body)
    return TaskResponse.from_model(task)


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: int,
    body: TaskUpdate,
    session: AsyncSession = Depends(db_session),
) -> TaskResponse:
    task = await TaskService(session=session).update_task(task_id, body)
    return TaskResponse.from_model(task)


@router.delete("/{task_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: int,
    session: AsyncSession = Depends(db_session),
) -> None:
    await TaskService(session=session).delete_task(task_id)
