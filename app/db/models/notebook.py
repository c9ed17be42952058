from sqlalchemy import Boolean, Column, ForeignKey, Index, String, false, text
from sqlalchemy.orm import relationship

from app.db.base import Base, TimestampMixin


class Notebook(TimestampMixin, Base):
    __tablename__ = "notebooks"

    notebook_id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    is_default = Column(Boolean, nullable=False, default=False, server_default=false())

    # Relationships
    owner = relationship("User", back_populates="notebooks")
    notes = relationship("Note", back_populates="notebook", cascade="all, delete-orphan")

    __table_args__ = (
        # не больше одного блокнота по умолчанию на пользователя
        Index(
            "uq_notebooks_default_per_user",
            "user_id",
            unique=True,
            postgresql_where=text("is_default"),
            sqlite_where=text("is_default"),
        ),
    )
