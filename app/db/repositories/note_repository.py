from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import InternalError
from app.db.base import load_json_document
from app.db.models.note import Note as NoteModel
from app.db.models.notebook import Notebook as NotebookModel
from app.domains.notes.entities import Note


class NoteRepository:
    """Репозиторий для работы с заметками

    Все выборки ограничены владельцем: чужая заметка неотличима от
    несуществующей.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def _select_with_notebook(self):
        return (
            select(NoteModel, NotebookModel.name)
            .join(NotebookModel, NoteModel.notebook_id == NotebookModel.notebook_id)
        )

    async def list_by_user(self, user_id: str) -> List[Note]:
        """Получение всех заметок пользователя, новые изменения первыми"""
        result = await self.session.execute(
            self._select_with_notebook()
            .where(NoteModel.user_id == user_id)
            .order_by(NoteModel.updated_at.desc())
        )
        return [self._to_domain(db_note, notebook_name) for db_note, notebook_name in result.all()]

    async def get_for_user(self, note_id: str, user_id: str) -> Optional[Note]:
        """Получение заметки по ID в пределах владельца"""
        result = await self.session.execute(
            self._select_with_notebook()
            .where(
                NoteModel.note_id == note_id,
                NoteModel.user_id == user_id
            )
        )
        row = result.one_or_none()
        if row is None:
            return None
        db_note, notebook_name = row
        return self._to_domain(db_note, notebook_name)

    async def create(self, note: Note) -> Note:
        """Создание новой заметки"""
        db_note = NoteModel(
            note_id=note.note_id,
            notebook_id=note.notebook_id,
            user_id=note.user_id,
            title=note.title,
            content=note.content,
            is_archived=note.is_archived,
            created_at=note.created_at,
            updated_at=note.updated_at
        )

        self.session.add(db_note)
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            raise InternalError("Note could not be stored") from exc

        created = self._to_domain(db_note)
        created.notebook_name = note.notebook_name
        return created

    async def update(self, note: Note) -> Note:
        """Обновление заметки"""
        stmt = (
            update(NoteModel)
            .where(
                NoteModel.note_id == note.note_id,
                NoteModel.user_id == note.user_id
            )
            .values(
                title=note.title,
                content=note.content,
                is_archived=note.is_archived,
                updated_at=note.updated_at
            )
            .returning(NoteModel)
        )

        try:
            result = await self.session.execute(stmt)
            db_note = result.scalar_one_or_none()
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise

        if db_note is None:
            return None
        updated = self._to_domain(db_note)
        updated.notebook_name = note.notebook_name
        return updated

    async def delete(self, note_id: str, user_id: str) -> bool:
        """Удаление заметки"""
        stmt = delete(NoteModel).where(
            NoteModel.note_id == note_id,
            NoteModel.user_id == user_id
        )

        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise

        return result.rowcount > 0

    def _to_domain(self, db_note: NoteModel, notebook_name: Optional[str] = None) -> Note:
        """Преобразование модели БД в доменную сущность"""
        return Note(
            note_id=db_note.note_id,
            notebook_id=db_note.notebook_id,
            user_id=db_note.user_id,
            title=db_note.title,
            content=load_json_document(db_note.content),
            is_archived=db_note.is_archived,
            created_at=db_note.created_at,
            updated_at=db_note.updated_at,
            notebook_name=notebook_name
        )
