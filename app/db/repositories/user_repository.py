from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import load_json_document
from app.db.models.user import User as UserModel
from app.domains.identity.entities import User


class UserRepository:
    """Репозиторий для работы с пользователями"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Получение пользователя по ID"""
        result = await self.session.execute(
            select(UserModel).where(UserModel.id == user_id)
        )
        db_user = result.scalar_one_or_none()
        return self._to_domain(db_user) if db_user else None

    async def update_settings(self, user: User) -> bool:
        """Сохранение настроек пользователя. Возвращает False, если строки нет"""
        stmt = (
            update(UserModel)
            .where(UserModel.id == user.id)
            .values(
                settings=user.settings,
                updated_at=user.updated_at
            )
        )

        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise

        return result.rowcount > 0

    def _to_domain(self, db_user: UserModel) -> User:
        """Преобразование модели БД в доменную сущность"""
        return User(
            id=db_user.id,
            name=db_user.name,
            email=db_user.email,
            settings=load_json_document(db_user.settings),
            created_at=db_user.created_at,
            updated_at=db_user.updated_at
        )
