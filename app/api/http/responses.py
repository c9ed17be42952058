from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Успешный ответ; ``code`` совпадает с HTTP-статусом"""
    message: str
    code: int
    data: Optional[T] = None


class ErrorResponse(BaseModel):
    """Ответ с ошибкой"""
    message: str


# Описание ошибок для OpenAPI
ERROR_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Unauthenticated"},
    404: {"model": ErrorResponse, "description": "Not found"},
    422: {"model": ErrorResponse, "description": "Invalid request"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}
