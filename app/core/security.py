import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from app.core.config import get_settings


def create_session_token(
    user_id: str,
    session_id: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Подпись токена сессии для ``user_id``.

    Сессии выдает провайдер аутентификации, функция нужна для
    служебных скриптов и тестов.
    """
    settings = get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.session_ttl_minutes)

    now = datetime.now(timezone.utc)
    to_encode = {
        "sub": user_id,
        "sid": session_id or uuid.uuid4().hex,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_session_token(token: str) -> Optional[Dict[str, Any]]:
    """Проверка токена сессии, возвращает claims или None"""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None

    if not payload.get("sub") or not payload.get("sid"):
        return None
    return payload

