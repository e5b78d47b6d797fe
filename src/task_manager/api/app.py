"""
task_manager.api.app

FastAPI app factory for the Task Manager service.

Responsibilities:
- Build the FastAPI application and register routers, middleware and exception handlers.
- Initialize and dispose shared infrastructure (DB engine/session factory) in the lifespan.
- Run the data initializer on startup.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from task_manager import __version__
from task_manager.api.errors import register_exception_handlers
from task_manager.api.routers.common import TOTAL_COUNT_HEADER
from task_manager.api.routers.debug import router as debug_router
from task_manager.api.routers.health import router as health_router
from task_manager.api.routers.labels import router as labels_router
from task_manager.api.routers.login import router as login_router
from task_manager.api.routers.task_statuses import router as task_statuses_router
from task_manager.api.routers.tasks import router as tasks_router
from task_manager.api.routers.users import router as users_router
from task_manager.db.init_db import init_db
from task_manager.db.seed import seed_data
from task_manager.db.session import create_engine, create_sessionmaker, session_scope
from task_manager.observability.logging import configure_logging, get_logger
from task_manager.observability.middleware import RequestContextMiddleware
from task_manager.observability.sentry import init_sentry
from task_manager.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.log_json,
    )
    init_sentry(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod schema is managed by Alembic migrations.
            await init_db(engine)
        if settings.seed_data:
            async with session_scope(app.state.sessionmaker) as session:
                await seed_data(session, settings)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Task Manager",
        version=__version__,
        docs_url="/swagger-ui",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[TOTAL_COUNT_HEADER],
    )
    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)

    app.include_router(health_router, tags=["health"])
    app.include_router(login_router)
    app.include_router(users_router)
    app.include_router(task_statuses_router)
    app.include_router(labels_router)
    app.include_router(tasks_router)
    if settings.env != "prod":
        app.include_router(debug_router)

    return app
