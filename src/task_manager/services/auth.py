from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from task_manager.auth.jwt import JwtConfig, issue_token
from task_manager.auth.passwords import verify_password
from task_manager.db.repositories.users import UserRepo
from task_manager.errors import InvalidCredentialsError
from task_manager.observability.logging import get_logger

log = get_logger(__name__)


class AuthService:
    """Exchange email/password credentials for a signed access token."""

    def __init__(self, *, session: AsyncSession, jwt_cfg: JwtConfig) -> None:
        self._users = UserRepo(session)
        self._jwt_cfg = jwt_cfg

    async def login(self, *, email: str, password: str) -> str:
        user = await self._users.get_by_email(email)
        # Same error for unknown email and wrong password.
        if user is None or not verify_password(password, user.password_digest):
            log.warning("auth.login_failed")
            raise InvalidCredentialsError()

        log.info("auth.login", user_id=user.id)
        return issue_token(cfg=self._jwt_cfg, subject=user.email, roles=[user.role.value])
