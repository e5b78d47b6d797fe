"""
task_manager.api.errors

Exception -> HTTP response translation.

Responsibilities:
- Render domain errors as `{"error": message}` with their mapped status.
- Render request validation failures as 400 with a `{field: message}` map.
- Log every handled error and forward it to Sentry.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from sentry_sdk import capture_exception
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from task_manager.errors import InvalidCredentialsError, TaskManagerError
from task_manager.observability.logging import get_logger

log = get_logger(__name__)


def _field_name(loc: Sequence[Any]) -> str:
    # List items report their index last (`("body", "taskLabelIds", 0)`); key by the field.
    for part in reversed(loc):
        if not isinstance(part, int):
            return str(part)
    return "body"


async def handle_domain_error(_: Request, exc: TaskManagerError) -> Response:
    log.warning("request.domain_error", error_type=type(exc).__name__, error=exc.message)
    capture_exception(exc)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def handle_invalid_credentials(_: Request, exc: InvalidCredentialsError) -> Response:
    log.warning("request.bad_credentials")
    capture_exception(exc)
    return Response(status_code=HTTP_401_UNAUTHORIZED)


async def handle_validation_error(_: Request, exc: RequestValidationError) -> Response:
    errors: dict[str, str] = {}
    for err in exc.errors():
        errors.setdefault(_field_name(err.get("loc") or ()), str(err.get("msg", "Invalid value")))
    log.info("request.validation_error", fields=sorted(errors))
    capture_exception(exc)
    return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content=errors)


async def handle_integrity_error(_: Request, exc: IntegrityError) -> Response:
    log.error("request.integrity_error", exc_info=exc)
    capture_exception(exc)
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"error": "Data integrity violation - check your input data"},
    )


async def handle_http_error(_: Request, exc: StarletteHTTPException) -> Response:
    log.info("request.http_error", status_code=exc.status_code, detail=exc.detail)
    capture_exception(exc)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=exc.headers,
    )


async def handle_unexpected_error(_: Request, exc: Exception) -> Response:
    log.error("request.unhandled_error", exc_info=exc)
    capture_exception(exc)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    # Starlette picks the most specific class in the MRO, so registration order is irrelevant.
    app.add_exception_handler(InvalidCredentialsError, handle_invalid_credentials)  # type: ignore[arg-type]
    app.add_exception_handler(TaskManagerError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(IntegrityError, handle_integrity_error)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, handle_http_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
