import logging
from typing import Optional, TypeVar

from app.core.errors import NotFound, Unauthenticated
from app.domains.identity.entities import User

logger = logging.getLogger(__name__)

R = TypeVar("R")


class OwnershipGuard:
    """Проверка доступа пользователя сессии к ресурсу.

    Ресурс - любой объект с атрибутом ``user_id``. Доступ есть только у
    владельца: ни администраторов, ни совместного доступа.
    """

    def require_user(self, user: Optional[User], action: str = "access notes") -> User:
        """Ошибка Unauthenticated, если сессии нет.

        Вызывается до любого обращения к хранилищу, чтобы анонимный запрос
        ничего не узнал о существующих ресурсах.
        """
        if user is None:
            raise Unauthenticated(f"Cannot {action}, you are unauthenticated")
        return user

    def authorize(self, user: User, resource) -> bool:
        return resource.user_id == user.id

    def ensure_owner(self, user: User, resource: Optional[R], message: str = "Not found") -> R:
        """Вернуть ``resource``, если он принадлежит ``user``, иначе NotFound.

        Отсутствующий и чужой ресурс дают одну и ту же ошибку.
        """
        if resource is None:
            raise NotFound(message)
        if not self.authorize(user, resource):
            logger.info("User %s denied access to resource owned by %s", user.id, resource.user_id)
            raise NotFound(message)
        return resource
