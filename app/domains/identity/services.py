import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import InternalError
from app.core.security import verify_session_token
from app.db.repositories.user_repository import UserRepository
from app.domains.access import OwnershipGuard
from app.domains.identity.entities import Session, User

logger = logging.getLogger(__name__)


class IdentityService:
    """Сервис для проверки сессий

    Сессии выдает провайдер аутентификации, здесь они только проверяются.
    """

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    @classmethod
    def from_session(cls, session: AsyncSession) -> "IdentityService":
        return cls(UserRepository(session))

    async def resolve_session(self, token: Optional[str]) -> Optional[Tuple[User, Session]]:
        """Получение пользователя и сессии по токену"""
        if not token:
            return None

        payload = verify_session_token(token)
        if payload is None:
            logger.debug("Rejected invalid or expired session token")
            return None

        user = await self.user_repository.get_by_id(payload["sub"])
        if user is None:
            logger.info("Session token references unknown user %s", payload["sub"])
            return None

        expires_at = None
        if payload.get("exp") is not None:
            expires_at = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)

        return user, Session(session_id=payload["sid"], user_id=user.id, expires_at=expires_at)


class SettingsService:
    """Сервис для работы с настройками пользователя"""

    def __init__(self, user_repository: UserRepository, guard: Optional[OwnershipGuard] = None):
        self.user_repository = user_repository
        self.guard = guard or OwnershipGuard()

    @classmethod
    def from_session(cls, session: AsyncSession) -> "SettingsService":
        return cls(UserRepository(session))

    async def get_settings(self, user: Optional[User]) -> Dict[str, Any]:
        """Получение настроек пользователя"""
        user = self.guard.require_user(user, "access settings")

        stored = await self.user_repository.get_by_id(user.id)
        if stored is None:
            logger.error("Authenticated user %s has no user row", user.id)
            raise InternalError("User record is missing")

        return stored.settings

    async def put_settings(self, user: Optional[User], settings: Dict[str, Any]) -> Dict[str, Any]:
        """Замена настроек пользователя целиком"""
        user = self.guard.require_user(user, "update settings")

        user.replace_settings(settings)
        if not await self.user_repository.update_settings(user):
            logger.error("Authenticated user %s has no user row", user.id)
            raise InternalError("User record is missing")

        logger.info("Replaced settings for user %s", user.id)
        return settings
