from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.notebook import Notebook as NotebookModel
from app.domains.notes.entities import Notebook


class NotebookRepository:
    """Репозиторий для работы с блокнотами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_default(self, user_id: str) -> Optional[Notebook]:
        """Получение блокнота по умолчанию для пользователя"""
        result = await self.session.execute(
            select(NotebookModel)
            .where(
                NotebookModel.user_id == user_id,
                NotebookModel.is_default.is_(True)
            )
            .limit(1)
        )
        db_notebook = result.scalar_one_or_none()
        return self._to_domain(db_notebook) if db_notebook else None

    def _to_domain(self, db_notebook: NotebookModel) -> Notebook:
        """Преобразование модели БД в доменную сущность"""
        return Notebook(
            notebook_id=db_notebook.notebook_id,
            user_id=db_notebook.user_id,
            name=db_notebook.name,
            is_default=db_notebook.is_default,
            created_at=db_notebook.created_at,
            updated_at=db_notebook.updated_at
        )
