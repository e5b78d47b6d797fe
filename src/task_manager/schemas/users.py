from __future__ import annotations

from datetime import date

from pydantic import EmailStr, Field

from task_manager.db.models import User
from task_manager.schemas.common import ApiModel


class UserCreate(ApiModel):
    email: EmailStr
    password: str = Field(min_length=3)
    first_name: str | None = Field(default=None, alias="firstName", min_length=2, max_length=50)
    last_name: str | None = Field(default=None, alias="lastName", min_length=2, max_length=50)


class UserUpdate(ApiModel):
    """Partial update; only fields present in the payload are applied."""

    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=3)
    first_name: str | None = Field(default=None, alias="firstName", min_length=2, max_length=50)
    last_name: str | None = Field(default=None, alias="lastName", min_length=2, max_length=50)


class UserResponse(ApiModel):
    id: int
    email: str
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    created_at: date = Field(alias="createdAt")
    updated_at: date | None = Field(default=None, alias="updatedAt")

    @classmethod
    def from_model(cls, user: User) -> UserResponse:
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            created_at=user.created_at.date(),
            updated_at=user.updated_at.date() if user.updated_at else None,
        )
