from sqlalchemy import Column, String, text
from sqlalchemy.orm import relationship

from app.db.base import Base, JSONDocument, TimestampMixin


class User(TimestampMixin, Base):
    __tablename__ = "user"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=True)
    settings = Column(JSONDocument, nullable=False, default=dict, server_default=text("'{}'"))

    # Relationships
    notebooks = relationship("Notebook", back_populates="owner", cascade="all, delete-orphan")
    notes = relationship("Note", back_populates="owner", cascade="all, delete-orphan")
