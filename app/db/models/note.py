from sqlalchemy import Boolean, Column, ForeignKey, Index, String, false, text
from sqlalchemy.orm import relationship

from app.db.base import Base, JSONDocument, TimestampMixin


class Note(TimestampMixin, Base):
    __tablename__ = "notes"

    note_id = Column(String, primary_key=True)
    notebook_id = Column(String, ForeignKey("notebooks.notebook_id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String, ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    title = Column(String, nullable=False, default="Untitled Note", server_default="Untitled Note")
    content = Column(JSONDocument, nullable=False, default=dict, server_default=text("'{}'"))
    is_archived = Column(Boolean, nullable=False, default=False, server_default=false())

    # Relationships
    owner = relationship("User", back_populates="notes")
    notebook = relationship("Notebook", back_populates="notes")

    __table_args__ = (
        Index("ix_notes_user_updated", "user_id", "updated_at"),
    )
