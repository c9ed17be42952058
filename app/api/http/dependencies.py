from typing import Any, Callable, Optional

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import TypeAdapter, ValidationError

from app.core.auth import get_current_user
from app.core.errors import Unauthenticated
from app.domains.identity.entities import User


async def require_session(user: Optional[User] = Depends(get_current_user)) -> User:
    """Отказ с 401 до разбора тела запроса"""
    if user is None:
        raise Unauthenticated("You are unauthenticated")
    return user


def json_body(type_: Any, default_factory: Optional[Callable[[], Any]] = None):
    """Зависимость, разбирающая JSON-тело после проверки сессии.

    FastAPI разбирает объявленные body-параметры раньше зависимостей роутера,
    поэтому тело читается здесь. Пустое тело дает ``default_factory()``,
    а без нее считается ошибкой.
    """
    adapter = TypeAdapter(type_)

    async def dependency(request: Request):
        raw = await request.body()
        if not raw.strip():
            if default_factory is not None:
                return default_factory()
            raise RequestValidationError(
                [{"type": "missing", "loc": ("body",), "msg": "Field required", "input": None}]
            )

        try:
            return adapter.validate_json(raw)
        except ValidationError as exc:
            raise RequestValidationError(
                [{**error, "loc": ("body", *error["loc"])} for error in exc.errors()]
            ) from exc

    return dependency
