"""Ошибки, которыми сервисы завершают запрос.

Сервисы их выбрасывают, а API превращает в ответ ``{"message": ...}``
с HTTP-статусом ``status_code``.
"""


class NotesError(Exception):
    """Базовая ошибка запроса"""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(NotesError):
    """Запрос без действующей сессии"""

    status_code = 401
    default_message = "You are unauthenticated"


class NotFound(NotesError):
    """Ресурс отсутствует или принадлежит другому пользователю.

    Оба случая дают один тип и одно сообщение, чтобы по ответу нельзя было
    узнать, какие заметки существуют.
    """

    status_code = 404
    default_message = "Not found"


class InternalError(NotesError):
    """Хранилище в состоянии, из которого сервис не может восстановиться"""

    status_code = 500
