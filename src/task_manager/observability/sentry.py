"""
task_manager.observability.sentry

Sentry error reporting setup.

`sentry_sdk.capture_exception` is a no-op until `init_sentry` has run with a
DSN, so exception handlers may call it unconditionally.
"""

from __future__ import annotations

import sentry_sdk

from task_manager.observability.logging import get_logger
from task_manager.settings import Settings

log = get_logger(__name__)


def init_sentry(settings: Settings) -> bool:
    if not settings.sentry_dsn:
        log.warning("sentry.disabled", reason="dsn not configured")
        return False

    log.info("sentry.init", dsn_prefix=settings.sentry_dsn[:20] + "...")
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.sentry_environment or settings.env,
        traces_sample_rate=settings.sentry_traces_sample_rate,
        send_default_pii=False,
    )
    return True


def sentry_enabled() -> bool:
    return sentry_sdk.is_initialized()
