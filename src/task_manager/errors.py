"""
task_manager.errors

Domain exceptions raised by the service layer.

Each exception carries the HTTP status it maps to; translation into responses
happens in `task_manager.api.errors`.
"""

from __future__ import annotations

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
)


class TaskManagerError(Exception):
    status_code: int = HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ResourceNotFoundError(TaskManagerError):
    status_code = HTTP_404_NOT_FOUND


class ResourceConflictError(TaskManagerError):
    status_code = HTTP_409_CONFLICT


class DuplicateEmailError(TaskManagerError):
    status_code = HTTP_400_BAD_REQUEST


class AccessDeniedError(TaskManagerError):
    status_code = HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(message)


class InvalidCredentialsError(TaskManagerError):
    status_code = HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Bad credentials") -> None:
        super().__init__(message)
