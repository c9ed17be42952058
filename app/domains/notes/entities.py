import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

DEFAULT_NOTE_TITLE = "Untitled Note"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Notebook:
    """Сущность блокнота

    Блокноты создаются вместе с пользователем, сервис их только читает.
    """

    def __init__(
        self,
        notebook_id: str,
        user_id: str,
        name: str,
        is_default: bool = False,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.notebook_id = notebook_id
        self.user_id = user_id
        self.name = name
        self.is_default = is_default
        self.created_at = created_at or utcnow()
        self.updated_at = updated_at or self.created_at

    def __repr__(self) -> str:
        return f"Notebook(notebook_id={self.notebook_id}, name={self.name}, is_default={self.is_default})"


class Note:
    """Сущность заметки"""

    def __init__(
        self,
        note_id: str,
        notebook_id: str,
        user_id: str,
        title: str = DEFAULT_NOTE_TITLE,
        content: Optional[Dict[str, Any]] = None,
        is_archived: bool = False,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        notebook_name: Optional[str] = None
    ):
        self.note_id = note_id
        self.notebook_id = notebook_id
        self.user_id = user_id
        self.title = title
        self.content = content if content is not None else {}
        self.is_archived = is_archived
        self.created_at = created_at or utcnow()
        self.updated_at = updated_at or self.created_at
        self.notebook_name = notebook_name

    @classmethod
    def create_note(
        cls,
        notebook: Notebook,
        title: Optional[str] = None,
        is_archived: Optional[bool] = None
    ) -> "Note":
        """Создание новой заметки в блокноте ``notebook``.

        Владелец заметки берется из блокнота.
        """
        now = utcnow()
        return cls(
            note_id=uuid.uuid4().hex,
            notebook_id=notebook.notebook_id,
            user_id=notebook.user_id,
            title=title or DEFAULT_NOTE_TITLE,
            content={},
            is_archived=is_archived or False,
            created_at=now,
            updated_at=now,
            notebook_name=notebook.name
        )

    def apply_update(
        self,
        title: Optional[str] = None,
        content: Optional[Dict[str, Any]] = None,
        is_archived: Optional[bool] = None
    ) -> None:
        """Частичное обновление: None оставляет прежнее значение"""
        if title is not None:
            self.title = title
        if content is not None:
            self.content = content
        if is_archived is not None:
            self.is_archived = is_archived
        self.updated_at = utcnow()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Note):
            return False
        return self.note_id == other.note_id

    def __repr__(self) -> str:
        return f"Note(note_id={self.note_id}, title={self.title}, user_id={self.user_id})"
