"""
task_manager.db.init_db

Schema bootstrap for `dev` and `test`. `prod` is migrated with Alembic (`alembic upgrade head`).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from task_manager.db import models  # noqa: F401  # registers tables on Base.metadata
from task_manager.db.base import Base
from task_manager.observability.logging import get_logger

log = get_logger(__name__)


async def init_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    log.info("db.schema_ready", tables=sorted(Base.metadata.tables))
