"""
task_manager.api.routers.debug

Error-reporting smoke test, mounted outside `prod` only.
"""

from __future__ import annotations

import time

import sentry_sdk
from fastapi import APIRouter
from pydantic import BaseModel

from task_manager.observability.logging import get_logger
from task_manager.observability.sentry import sentry_enabled

log = get_logger(__name__)

router = APIRouter(prefix="/debug", tags=["debug"])


class SentryCheckResponse(BaseModel):
    enabled: bool
    exception_event_id: str | None = None
    message_event_id: str | None = None


@router.get("/sentry", response_model=SentryCheckResponse)
async def sentry_check() -> SentryCheckResponse:
    enabled = sentry_enabled()
    log.info("debug.sentry_check", enabled=enabled)
    if not enabled:
        return SentryCheckResponse(enabled=False)

    stamp = int(time.time() * 1000)
    try:
        raise RuntimeError(f"Sentry test error - timestamp: {stamp}")
    except RuntimeError as e:
        exception_id = sentry_sdk.capture_exception(e)
    message_id = sentry_sdk.capture_message(f"Test message from task-manager - {stamp}")
    log.info("debug.sentry_sent", exception_event_id=exception_id, message_event_id=message_id)
    return SentryCheckResponse(
        enabled=True,
        exception_event_id=exception_id,
        message_event_id=message_id,
    )
