from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from task_manager.api.deps import db_session
from task_manager.api.routers.common import set_total_count
from task_manager.auth.deps import get_current_user
from task_manager.schemas.task_statuses import (
    TaskStatusCreate,
    TaskStatusResponse,
    TaskStatusUpdate,
)
from task_manager.services.task_statuses import TaskStatusService

router = APIRouter(
    prefix="/api/task_statuses",
    tags=["task-statuses"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[TaskStatusResponse])
async def list_task_statuses(
    response: Response,
    session: AsyncSession = Depends(db_session),
) -> list[TaskStatusResponse]:
    statuses = await TaskStatusService(session=session).list_statuses()
    set_total_count(response, len(statuses))
    return [TaskStatusResponse.from_model(s) for s in statuses]


@router.get("/{status_id}", response_model=TaskStatusResponse)
async def get_task_status(
    status_id: int,
    session: AsyncSession = Depends(db_session),
) -> TaskStatusResponse:
    status = await TaskStatusService(session=session).get_status(status_id)
    return TaskStatusResponse.from_model(status)


@router.post("", response_model=TaskStatusResponse, status_code=HTTP_201_CREATED)
async def create_task_status(
    body: TaskStatusCreate,
    session: AsyncSession = Depends(db_session),
) -> TaskStatusResponse:
    status = await TaskStatusService(session=session).create_status(body)
    return TaskStatusResponse.from_model(status)


@router.put("/{status_id}", response_model=TaskStatusResponse)
async def update_task_status(
    status_id: int,
    body: TaskStatusUpdate,
    session: AsyncSession = Depends(db_session),
) -> TaskStatusResponse:
    status = await TaskStatusService(session=session).update_status(status_id, body)
    return TaskStatusResponse.from_model(status)


@router.delete("/{status_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_task_status(
    status_id: int,
    session: AsyncSession = Depends(db_session),
) -> None:
    await TaskStatusService(session=session).delete_status(status_id)
