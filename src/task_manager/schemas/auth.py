from __future__ import annotations

from pydantic import Field

from task_manager.schemas.common import ApiModel


class LoginRequest(ApiModel):
    # `username` carries the account email.
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
