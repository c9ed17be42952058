from datetime import datetime, timezone
from typing import Any, Dict, Optional


class User:
    """Сущность пользователя

    Идентификационные поля принадлежат провайдеру аутентификации,
    сервис изменяет только ``settings``.
    """

    def __init__(
        self,
        id: str,
        name: str,
        email: Optional[str] = None,
        settings: Optional[Dict[str, Any]] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.name = name
        self.email = email
        self.settings = settings if settings is not None else {}
        self.created_at = created_at or datetime.now(timezone.utc)
        self.updated_at = updated_at or self.created_at

    def replace_settings(self, settings: Dict[str, Any]) -> None:
        """Заменить настройки целиком, без слияния"""
        self.settings = settings
        self.updated_at = datetime.now(timezone.utc)

    def __eq__(self, other) -> bool:
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"User(id={self.id}, name={self.name})"


class Session:
    """Проверенная сессия текущего запроса"""

    def __init__(self, session_id: str, user_id: str, expires_at: Optional[datetime] = None):
        self.session_id = session_id
        self.user_id = user_id
        self.expires_at = expires_at

    def __repr__(self) -> str:
        return f"Session(session_id={self.session_id}, user_id={self.user_id})"
