from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.http.dependencies import json_body, require_session
from app.api.http.responses import ERROR_RESPONSES, ApiResponse
from app.core.db import get_db
from app.domains.identity.entities import User
from app.domains.identity.services import SettingsService

router = APIRouter(
    prefix="/user",
    tags=["user"],
    dependencies=[Depends(require_session)],
    responses=ERROR_RESPONSES
)


def get_settings_service(db: AsyncSession = Depends(get_db)) -> SettingsService:
    return SettingsService.from_session(db)


@router.get("/settings", response_model=ApiResponse[Dict[str, Any]])
async def get_settings(
    user: User = Depends(require_session),
    settings_service: SettingsService = Depends(get_settings_service)
):
    """Получение настроек пользователя"""
    settings = await settings_service.get_settings(user)

    return ApiResponse(
        message=f"Fetched settings for {user.name}",
        code=status.HTTP_200_OK,
        data=settings
    )


@router.put("/settings", response_model=ApiResponse[Dict[str, Any]])
async def put_settings(
    user: User = Depends(require_session),
    settings: Dict[str, Any] = Depends(json_body(Dict[str, Any])),
    settings_service: SettingsService = Depends(get_settings_service)
):
    """Замена настроек пользователя"""
    stored = await settings_service.put_settings(user, settings)

    return ApiResponse(
        message=f"Updated settings for {user.name}",
        code=status.HTTP_200_OK,
        data=stored
    )
