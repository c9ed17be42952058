import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFound
from app.db.repositories.note_repository import NoteRepository
from app.db.repositories.notebook_repository import NotebookRepository
from app.domains.access import OwnershipGuard
from app.domains.identity.entities import User
from app.domains.notes.entities import Note
from app.domains.notes.schemas import NoteCreate, NoteUpdate

logger = logging.getLogger(__name__)


class NoteService:
    """Сервис для работы с заметками

    Каждая операция проверяет сессию до обращения к хранилищу.
    """

    def __init__(
        self,
        note_repository: NoteRepository,
        notebook_repository: NotebookRepository,
        guard: Optional[OwnershipGuard] = None
    ):
        self.note_repository = note_repository
        self.notebook_repository = notebook_repository
        self.guard = guard or OwnershipGuard()

    @classmethod
    def from_session(cls, session: AsyncSession) -> "NoteService":
        return cls(NoteRepository(session), NotebookRepository(session))

    async def list_notes(self, user: Optional[User]) -> List[Note]:
        """Получение всех заметок пользователя"""
        user = self.guard.require_user(user, "access notes")
        notes = await self.note_repository.list_by_user(user.id)
        logger.debug("Listed %d notes for user %s", len(notes), user.id)
        return notes

    async def get_note(self, user: Optional[User], note_id: str) -> Note:
        """Получение заметки по ID"""
        user = self.guard.require_user(user, "access notes")
        note = await self.note_repository.get_for_user(note_id, user.id)
        return self.guard.ensure_owner(user, note, "Note not found")

    async def create_note(self, user: Optional[User], note_data: NoteCreate) -> Note:
        """Создание новой заметки в блокноте по умолчанию"""
        user = self.guard.require_user(user, "create notes")

        notebook = await self.notebook_repository.get_default(user.id)
        notebook = self.guard.ensure_owner(
            user, notebook, "Default notebook not found. Create one first"
        )

        note = Note.create_note(
            notebook,
            title=note_data.title,
            is_archived=note_data.is_archived
        )
        created = await self.note_repository.create(note)

        logger.info("Created note %s for user %s", created.note_id, user.id)
        return created

    async def update_note(self, user: Optional[User], note_id: str, update_data: NoteUpdate) -> Note:
        """Частичное обновление заметки"""
        user = self.guard.require_user(user, "edit notes")

        existing = await self.note_repository.get_for_user(note_id, user.id)
        note = self.guard.ensure_owner(user, existing, "Note not found or not authorized")

        note.apply_update(
            title=update_data.title,
            content=update_data.content,
            is_archived=update_data.is_archived
        )
        updated = await self.note_repository.update(note)

        # удалена между чтением и записью
        if updated is None:
            raise NotFound("Note not found or not authorized")

        logger.info("Updated note %s for user %s", note_id, user.id)
        return updated

    async def delete_note(self, user: Optional[User], note_id: str) -> None:
        """Удаление заметки"""
        user = self.guard.require_user(user, "delete notes")

        existing = await self.note_repository.get_for_user(note_id, user.id)
        self.guard.ensure_owner(user, existing, "Note not found or not authorized")

        await self.note_repository.delete(note_id, user.id)
        logger.info("Deleted note %s for user %s", note_id, user.id)
