from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.http.dependencies import json_body, require_session
from app.api.http.responses import ERROR_RESPONSES, ApiResponse
from app.core.db import get_db
from app.domains.identity.entities import User
from app.domains.notes.schemas import NoteCreate, NoteResponse, NoteUpdate
from app.domains.notes.services import NoteService

router = APIRouter(
    prefix="/notes",
    tags=["notes"],
    dependencies=[Depends(require_session)],
    responses=ERROR_RESPONSES
)


def get_note_service(db: AsyncSession = Depends(get_db)) -> NoteService:
    return NoteService.from_session(db)


@router.get("", response_model=ApiResponse[List[NoteResponse]])
async def list_notes(
    user: User = Depends(require_session),
    note_service: NoteService = Depends(get_note_service)
):
    """Получение списка заметок"""
    notes = await note_service.list_notes(user)

    return ApiResponse(
        message=f"Fetched all notes from {user.name}",
        code=status.HTTP_200_OK,
        data=[NoteResponse.model_validate(note) for note in notes]
    )


@router.get("/{note_id}", response_model=ApiResponse[NoteResponse])
async def get_note(
    note_id: str,
    user: User = Depends(require_session),
    note_service: NoteService = Depends(get_note_service)
):
    """Получение заметки по ID"""
    note = await note_service.get_note(user, note_id)

    return ApiResponse(
        message=f"Fetched note with id {note_id} from {user.name}",
        code=status.HTTP_200_OK,
        data=NoteResponse.model_validate(note)
    )


@router.post("", response_model=ApiResponse[NoteResponse], status_code=status.HTTP_201_CREATED)
async def create_note(
    user: User = Depends(require_session),
    note_data: NoteCreate = Depends(json_body(NoteCreate, NoteCreate)),
    note_service: NoteService = Depends(get_note_service)
):
    """Создание новой заметки"""
    note = await note_service.create_note(user, note_data)

    return ApiResponse(
        message="Note created",
        code=status.HTTP_201_CREATED,
        data=NoteResponse.model_validate(note)
    )


@router.put("/{note_id}", response_model=ApiResponse[NoteResponse])
async def update_note(
    note_id: str,
    user: User = Depends(require_session),
    update_data: NoteUpdate = Depends(json_body(NoteUpdate, NoteUpdate)),
    note_service: NoteService = Depends(get_note_service)
):
    """Обновление заметки (частичное)"""
    note = await note_service.update_note(user, note_id, update_data)

    return ApiResponse(
        message=f"Updated note with id {note_id}",
        code=status.HTTP_200_OK,
        data=NoteResponse.model_validate(note)
    )


@router.delete("/{note_id}", response_model=ApiResponse)
async def delete_note(
    note_id: str,
    user: User = Depends(require_session),
    note_service: NoteService = Depends(get_note_service)
):
    """Удаление заметки"""
    await note_service.delete_note(user, note_id)

    return ApiResponse(
        message=f"Deleted note with id {note_id}",
        code=status.HTTP_200_OK
    )
