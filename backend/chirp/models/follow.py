"""Follow ORM — directed edge between two authors.

Invariants:
    - Identity is the (follower_id, following_id) pair; the store rejects duplicates
    - Not symmetric: A following B says nothing about B following A
    - follower_id == following_id is the self-follow edge inserted at author creation

Design Decisions:
    - Explicit edge table instead of an association relationship: repositories query
      edges directly, no ORM collection is ever loaded
"""

from sqlalchemy import Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from chirp.db.base import Base


class Follow(Base):
    """Follow edge: follower sees following's cheeps in their followed timeline."""
    __tablename__ = "follows"

    follower_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("authors.id", ondelete="CASCADE"), primary_key=True,
    )
    following_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("authors.id", ondelete="CASCADE"), primary_key=True,
        index=True,
    )
