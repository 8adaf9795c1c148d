"""Author ORM — persists a cheep author.

Invariants:
    - name and email are each unique across all authors
    - Every author has a self-follow edge from creation onwards (see AuthorRepository)

Design Decisions:
    - Integer autoincrement key: store-assigned identity, no client-side ids
    - cheeps relationship is lazy="raise": async code loads cheeps with explicit queries,
      so an accidental lazy load fails loudly instead of doing hidden IO
    - passive_deletes: cheep rows are removed by explicit DELETE / FK cascade,
      never by loading the collection
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chirp.db.base import Base


class Author(Base):
    """Author entity — owns cheeps, follows and is followed by other authors."""
    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True, index=True,
    )
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )

    # Relationships
    cheeps: Mapped[list["Cheep"]] = relationship(
        "Cheep", back_populates="author",
        passive_deletes=True, lazy="raise",
    )
