"""
task_manager.api.__main__

Entrypoint for `python -m task_manager.api` and the `task-manager` console script.
"""

from __future__ import annotations

import uvicorn

from task_manager.api.app import create_app
from task_manager.observability.logging import get_logger
from task_manager.settings import get_settings

log = get_logger(__name__)


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)
    log.info("server.starting", host=settings.api_host, port=settings.api_port, env=settings.env)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        # structlog owns log output; RequestContextMiddleware already emits one event per request.
        log_config=None,
        access_log=False,
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
