"""
task_manager.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for API, persistence, auth and error reporting.
- Hide secrets (JWT secret, admin password, Sentry DSN) from repr/logging.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TASK_MANAGER_", case_sensitive=False)

    # dev/test create tables on startup and mount debug routes.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "task-manager"
    log_level: str = "INFO"
    log_json: bool = True

    api_host: str = "0.0.0.0"
    api_port: int = 8080
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Auth
    jwt_alg: str = "HS256"
    jwt_issuer: str = "task-manager"
    jwt_audience: str = "task-manager-api"
    jwt_secret: str = Field(default="dev-secret-change-me", repr=False)
    jwt_ttl_minutes: int = Field(default=60, ge=1)

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./task_manager.db"

    # Data initializer
    seed_data: bool = True
    admin_email: str = "hexlet@example.com"
    admin_password: str = Field(default="qwerty", repr=False)

    # Error reporting
    sentry_dsn: str | None = Field(default=None, repr=False)
    sentry_environment: str | None = None
    sentry_traces_sample_rate: float = Field(default=0.0, ge=0.0, le=1.0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
