from app.db.repositories.user_repository import UserRepository
from app.db.repositories.notebook_repository import NotebookRepository
from app.db.repositories.note_repository import NoteRepository

__all__ = [
    "UserRepository",
    "NotebookRepository",
    "NoteRepository"
]
