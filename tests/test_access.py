import pytest

from app.core.errors import NotFound, Unauthenticated
from app.domains.access import OwnershipGuard
from app.domains.identity.entities import User
from app.domains.notes.entities import Note


@pytest.fixture()
def guard():
    return OwnershipGuard()


def _note(owner_id):
    return Note(note_id="n1", notebook_id="nb1", user_id=owner_id)


def test_require_user_without_session(guard):
    with pytest.raises(Unauthenticated) as exc_info:
        guard.require_user(None, "access notes")
    assert exc_info.value.status_code == 401
    assert "unauthenticated" in exc_info.value.message


def test_require_user_returns_user(guard):
    user = User(id="u1", name="Alice")
    assert guard.require_user(user) is user


def test_authorize_only_owner(guard):
    alice = User(id="u1", name="Alice")
    bob = User(id="u2", name="Bob")
    note = _note("u1")

    assert guard.authorize(alice, note) is True
    assert guard.authorize(bob, note) is False


def test_missing_and_foreign_resources_look_the_same(guard):
    bob = User(id="u2", name="Bob")

    with pytest.raises(NotFound) as missing:
        guard.ensure_owner(bob, None, "Note not found")
    with pytest.raises(NotFound) as foreign:
        guard.ensure_owner(bob, _note("u1"), "Note not found")

    assert missing.value.message == foreign.value.message
    assert missing.value.status_code == foreign.value.status_code == 404


def test_ensure_owner_returns_resource(guard):
    alice = User(id="u1", name="Alice")
    note = _note("u1")
    assert guard.ensure_owner(alice, note) is note
