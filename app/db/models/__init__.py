from app.db.models.user import User
from app.db.models.notebook import Notebook
from app.db.models.note import Note

__all__ = [
    "User",
    "Notebook",
    "Note"
]
