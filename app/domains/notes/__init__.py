from app.domains.notes.entities import Note, Notebook, DEFAULT_NOTE_TITLE
from app.domains.notes.schemas import NoteCreate, NoteUpdate, NoteResponse

__all__ = [
    "Note", "Notebook", "DEFAULT_NOTE_TITLE",
    "NoteCreate", "NoteUpdate", "NoteResponse"
]
