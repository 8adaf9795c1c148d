"""Cheep ORM — a short authored text message with a timestamp.

Invariants:
    - Always belongs to exactly one Author (author_id FK, required)
    - timestamp is timezone-aware on write

Design Decisions:
    - ON DELETE CASCADE on author_id: the store drops cheeps with their author even
      when a row is deleted outside the repository
    - Composite index (author_id, timestamp): author timelines sort by timestamp
"""

from datetime import datetime

from sqlalchemy import Integer, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chirp.db.base import Base


class Cheep(Base):
    """Cheep entity."""
    __tablename__ = "cheeps"
    __table_args__ = (
        Index("ix_cheeps_author_id_timestamp", "author_id", "timestamp"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    author_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("authors.id", ondelete="CASCADE"), nullable=False,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True,
    )

    # Relationships
    author: Mapped["Author"] = relationship(
        "Author", back_populates="cheeps", lazy="raise",
    )
