"""
task_manager.db.models

Persistence schema for the task manager.

Responsibilities:
- Define ORM models:
  - User: account with hashed password and role
  - TaskStatus: workflow column a task sits in (e.g. draft, published)
  - Label: free-form tag attachable to many tasks
  - Task: unit of work with a status, optional assignee and labels
"""

from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import Column, Enum, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from task_manager.db.base import Base


def _utcnow() -> datetime:
    # Naive UTC timestamps; the API only exposes the date part.
    return datetime.utcnow()


class UserRole(enum.StrEnum):
    user = "USER"
    admin = "ADMIN"


task_labels = Table(
    "task_labels",
    Base.metadata,
    Column("task_id", ForeignKey("tasks.id", ondelete="CASCADE"), primary_key=True),
    Column("label_id", ForeignKey("labels.id"), primary_key=True),
)


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password_digest: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(Enum(UserRole), nullable=False, default=UserRole.user)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, onupdate=_utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.admin


class TaskStatus(Base):
    __tablename__ = "task_statuses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)


class Label(Base):
    __tablename__ = "labels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(1000), nullable=False, unique=True)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)


class Task(Base):
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    index: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    task_status_id: Mapped[int] = mapped_column(
        ForeignKey("task_statuses.id"), nullable=False, index=True
    )
    assignee_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id"), nullable=True, index=True
    )

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)

    # selectin loading keeps relationship access safe under AsyncSession (no implicit IO).
    task_status: Mapped[TaskStatus] = relationship(lazy="selectin")
    assignee: Mapped[User | None] = relationship(lazy="selectin")
    labels: Mapped[list[Label]] = relationship(
        secondary=task_labels, lazy="selectin", order_by=Label.id
    )
