from typing import Optional, Tuple

from fastapi import APIRouter, Depends, status

from app.api.http.responses import ERROR_RESPONSES, ApiResponse
from app.core.auth import get_current_session
from app.core.errors import Unauthenticated
from app.domains.identity.entities import Session, User
from app.domains.identity.schemas import CurrentSessionResponse, SessionResponse, UserResponse

router = APIRouter(prefix="/auth", tags=["authentication"], responses=ERROR_RESPONSES)


@router.get("/session", response_model=ApiResponse[CurrentSessionResponse])
async def get_session(
    current: Optional[Tuple[User, Session]] = Depends(get_current_session)
):
    """Получение текущей сессии"""
    if current is None:
        raise Unauthenticated("No active session")

    user, session = current
    return ApiResponse(
        message=f"Active session for {user.name}",
        code=status.HTTP_200_OK,
        data=CurrentSessionResponse(
            user=UserResponse.model_validate(user),
            session=SessionResponse.model_validate(session)
        )
    )
