"""Row → entity mapping in the repositories."""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from app.core.errors import InternalError
from app.db.base import load_json_document
from app.db.repositories.note_repository import NoteRepository
from app.db.repositories.user_repository import UserRepository
from app.domains.notes.entities import Note


NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _note_row(content):
    return SimpleNamespace(
        note_id="n1",
        notebook_id="nb1",
        user_id="u1",
        title="Title",
        content=content,
        is_archived=False,
        created_at=NOW,
        updated_at=NOW,
    )


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('{"blocks": []}', {"blocks": []}),
        (b'{"a": 1}', {"a": 1}),
        ({"a": 1}, {"a": 1}),
        (None, {}),
    ],
)
def test_load_json_document(raw, expected):
    assert load_json_document(raw) == expected


def test_note_content_text_is_parsed():
    repo = NoteRepository(MagicMock())
    note = repo._to_domain(_note_row('{"blocks": [1, 2]}'), "Inbox")

    assert note.content == {"blocks": [1, 2]}
    assert note.notebook_name == "Inbox"


def test_user_settings_text_is_parsed():
    repo = UserRepository(MagicMock())
    row = SimpleNamespace(
        id="u1", name="Alice", email=None, settings='{"theme": "dark"}',
        created_at=NOW, updated_at=NOW,
    )

    user = repo._to_domain(row)
    assert user.settings == {"theme": "dark"}


@pytest.mark.asyncio
async def test_get_for_user_missing_row():
    session = MagicMock()
    result = MagicMock()
    result.one_or_none.return_value = None
    session.execute = AsyncMock(return_value=result)

    repo = NoteRepository(session)
    assert await repo.get_for_user("n1", "u1") is None
    session.execute.assert_awaited_once()


@pytest.mark.asyncio
async def test_delete_commits_single_write():
    session = MagicMock()
    session.execute = AsyncMock(return_value=MagicMock(rowcount=1))
    session.commit = AsyncMock()

    repo = NoteRepository(session)
    assert await repo.delete("n1", "u1") is True
    session.execute.assert_awaited_once()
    session.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_update_settings_reports_missing_row():
    session = MagicMock()
    session.execute = AsyncMock(return_value=MagicMock(rowcount=0))
    session.commit = AsyncMock()

    repo = UserRepository(session)
    user = SimpleNamespace(id="ghost", settings={}, updated_at=NOW)
    assert await repo.update_settings(user) is False


@pytest.mark.asyncio
async def test_create_integrity_error_is_internal():
    session = MagicMock()
    session.add = MagicMock()
    session.commit = AsyncMock(side_effect=IntegrityError("INSERT", {}, Exception("fk")))
    session.rollback = AsyncMock()

    repo = NoteRepository(session)
    note = Note(note_id="n1", notebook_id="missing", user_id="u1")

    with pytest.raises(InternalError) as exc_info:
        await repo.create(note)

    assert exc_info.value.status_code == 500
    session.rollback.assert_awaited_once()
