from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from task_manager.api.deps import db_session
from task_manager.api.routers.common import set_total_count
from task_manager.auth.deps import get_current_user
from task_manager.schemas.labels import LabelPayload, LabelResponse
from task_manager.services.labels import LabelService

router = APIRouter(
    prefix="/api/labels",
    tags=["labels"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[LabelResponse])
async def list_labels(
    response: Response,
    session: AsyncSession = Depends(db_session),
) -> list[LabelResponse]:
    labels = await LabelService(session=session).list_labels()
    set_total_count(response, len(labels))
    return [LabelResponse.from_model(label) for label in labels]


@router.get("/{label_id}", response_model=LabelResponse)
async def get_label(
    label_id: int,
    session: AsyncSession = Depends(db_session),
) -> LabelResponse:
    label = await LabelService(session=session).get_label(label_id)
    return LabelResponse.from_model(label)


@router.post("", response_model=LabelResponse, status_code=HTTP_201_CREATED)
async def create_label(
    body: LabelPayload,
    session: AsyncSession = Depends(db_session),
) -> LabelResponse:
    label = await LabelService(session=session).create_label(body)
    return LabelResponse.from_model(label)


@router.put("/{label_id}", response_model=LabelResponse)
async def update_label(
    label_id: int,
    body: LabelPayload,
    session: AsyncSession = Depends(db_session),
) -> LabelResponse:
    label = await LabelService(session=session).update_label(label_id, body)
    return LabelResponse.from_model(label)


@router.delete("/{label_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_label(
    label_id: int,
    session: AsyncSession = Depends(db_session),
) -> None:
    await LabelService(session=session).delete_label(label_id)
