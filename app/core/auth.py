from typing import Optional, Tuple

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.db import get_db
from app.domains.identity.entities import Session, User
from app.domains.identity.services import IdentityService

# Отсутствие токена здесь не ошибка, решают роутеры и сервисы
bearer_scheme = HTTPBearer(auto_error=False)


def get_identity_service(db: AsyncSession = Depends(get_db)) -> IdentityService:
    return IdentityService.from_session(db)


async def get_current_session(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    identity_service: IdentityService = Depends(get_identity_service)
) -> Optional[Tuple[User, Session]]:
    """Получение ``(user, session)`` по bearer-токену или cookie сессии"""
    if credentials is not None:
        token = credentials.credentials
    else:
        token = request.cookies.get(get_settings().session_cookie_name)

    return await identity_service.resolve_session(token)


async def get_current_user(
    current: Optional[Tuple[User, Session]] = Depends(get_current_session)
) -> Optional[User]:
    if current is None:
        return None
    return current[0]
