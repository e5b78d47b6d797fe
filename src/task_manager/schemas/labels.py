from __future__ import annotations

from datetime import date

from pydantic import Field

from task_manager.db.models import Label
from task_manager.schemas.common import ApiModel, NonBlankStr


class LabelPayload(ApiModel):
    # Used for both create and update: a label only has a name.
    name: NonBlankStr = Field(min_length=3, max_length=1000)


class LabelResponse(ApiModel):
    id: int
    name: str
    created_at: date = Field(alias="createdAt")

    @classmethod
    def from_model(cls, label: Label) -> LabelResponse:
        return cls(id=label.id, name=label.name, created_at=label.created_at.date())
