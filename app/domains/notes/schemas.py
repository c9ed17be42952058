from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class NoteCreate(BaseModel):
    """Схема для создания заметки"""
    title: Optional[str] = None
    is_archived: Optional[bool] = None


class NoteUpdate(BaseModel):
    """Схема для обновления заметки (отсутствующие поля не меняются)"""
    title: Optional[str] = None
    content: Optional[Dict[str, Any]] = None
    is_archived: Optional[bool] = None


class NoteResponse(BaseModel):
    """Схема для ответа с данными заметки"""
    note_id: str
    notebook_id: str
    user_id: str
    title: str
    content: Dict[str, Any]
    is_archived: bool
    created_at: datetime
    updated_at: datetime
    notebook_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
