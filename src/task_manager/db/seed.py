"""
task_manager.db.seed

Startup data initializer.

Responsibilities:
- Ensure the administrator account exists.
- Ensure the default task statuses exist.

Both steps are idempotent: existing records (matched by email / slug) are left untouched.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from task_manager.auth.passwords import hash_password
from task_manager.db.models import UserRole
from task_manager.db.repositories.task_statuses import TaskStatusRepo
from task_manager.db.repositories.users import UserRepo
from task_manager.observability.logging import get_logger
from task_manager.settings import Settings

log = get_logger(__name__)

DEFAULT_TASK_STATUSES: tuple[tuple[str, str], ...] = (
    ("Draft", "draft"),
    ("To Review", "to_review"),
    ("To Be Fixed", "to_be_fixed"),
    ("To Publish", "to_publish"),
    ("Published", "published"),
)


async def seed_data(session: AsyncSession, settings: Settings) -> None:
    await _create_admin_user(session, settings)
    await _create_default_task_statuses(session)
    await session.commit()


async def _create_admin_user(session: AsyncSession, settings: Settings) -> None:
    users = UserRepo(session)
    if await users.exists_by_email(settings.admin_email):
        return
    admin = await users.create(
        email=settings.admin_email,
        password_digest=hash_password(settings.admin_password),
        first_name="Admin",
        last_name="System",
        role=UserRole.admin,
    )
    log.info("seed.admin_created", user_id=admin.id, email=admin.email)


async def _create_default_task_statuses(session: AsyncSession) -> None:
    statuses = TaskStatusRepo(session)
    for name, slug in DEFAULT_TASK_STATUSES:
        if await statuses.get_by_slug(slug) is not None:
            continue
        status = await statuses.create(name=name, slug=slug)
        log.info("seed.task_status_created", task_status_id=status.id, slug=slug)
