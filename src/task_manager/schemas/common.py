from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


class ApiModel(BaseModel):
    # Accept both the JSON alias (firstName) and the attribute name (first_name).
    model_config = ConfigDict(populate_by_name=True)
