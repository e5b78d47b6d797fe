from __future__ import annotations

from datetime import date

from pydantic import Field

from task_manager.db.models import TaskStatus
from task_manager.schemas.common import ApiModel, NonBlankStr


class TaskStatusCreate(ApiModel):
    name: NonBlankStr = Field(max_length=255)
    slug: NonBlankStr = Field(max_length=255)


class TaskStatusUpdate(ApiModel):
    name: NonBlankStr | None = Field(default=None, max_length=255)
    slug: NonBlankStr | None = Field(default=None, max_length=255)


class TaskStatusResponse(ApiModel):
    id: int
    name: str
    slug: str
    created_at: date = Field(alias="createdAt")

    @classmethod
    def from_model(cls, status: TaskStatus) -> TaskStatusResponse:
        return cls(
            id=status.id,
            name=status.name,
            slug=status.slug,
            created_at=status.created_at.date(),
        )
