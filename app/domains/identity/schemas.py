from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    """Схема для ответа с данными пользователя"""
    id: str
    name: str
    email: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class SessionResponse(BaseModel):
    """Схема текущей сессии"""
    session_id: str
    user_id: str
    expires_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class CurrentSessionResponse(BaseModel):
    user: UserResponse
    session: SessionResponse
