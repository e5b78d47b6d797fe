"""
task_manager.schemas.tasks

Task payloads and the Task -> DTO mapper.

The wire format keeps the field names clients already use: `title`/`content`
for the task name/description, `status` for the status slug, `assignee_id`
in snake case and `taskLabelIds` in camel case.
"""

from __future__ import annotations

from datetime import date

from pydantic import Field

from task_manager.db.models import Task
from task_manager.schemas.common import ApiModel, NonBlankStr


class TaskFilterParams(ApiModel):
    title_cont: str | None = None
    assignee_id: int | None = None
    status: str | None = None
    label_id: int | None = None

    @property
    def normalized_title(self) -> str | None:
        return self.title_cont.strip() if self.title_cont and self.title_cont.strip() else None

    @property
    def normalized_status(self) -> str | None:
        return self.status.strip() if self.status and self.status.strip() else None


class TaskCreate(ApiModel):
    title: NonBlankStr = Field(max_length=255)
    status: NonBlankStr
    content: str | None = None
    index: int | None = None
    assignee_id: int | None = None
    task_label_ids: list[int] | None = Field(default=None, alias="taskLabelIds")


class TaskUpdate(ApiModel):
    """Partial update; `model_fields_set` tells absent fields from explicit nulls."""

    title: NonBlankStr | None = Field(default=None, max_length=255)
    status: NonBlankStr | None = None
    content: str | None = None
    index: int | None = None
    assignee_id: int | None = None
    task_label_ids: list[int] | None = Field(default=None, alias="taskLabelIds")


class TaskResponse(ApiModel):
    id: int
    index: int | None = None
    created_at: date = Field(alias="createdAt")
    assignee_id: int | None = None
    title: str
    content: str | None = None
    status: str
    task_label_ids: list[int] = Field(default_factory=list, alias="taskLabelIds")

    @classmethod
    def from_model(cls, task: Task) -> TaskResponse:
        return cls(
            id=task.id,
            index=task.index,
            created_at=task.created_at.date(),
            assignee_id=task.assignee_id,
            title=task.name,
            content=task.description,
            status=task.task_status.slug,
            task_label_ids=sorted(label.id for label in task.labels),
        )
