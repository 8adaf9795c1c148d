"""Initial schema — authors, cheeps, follows.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "authors",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
    )
    op.create_index("ix_authors_name", "authors", ["name"], unique=True)
    op.create_index("ix_authors_email", "authors", ["email"], unique=True)

    op.create_table(
        "cheeps",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "author_id", sa.Integer,
            sa.ForeignKey("authors.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("text", sa.Text, nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_cheeps_timestamp", "cheeps", ["timestamp"])
    op.create_index(
        "ix_cheeps_author_id_timestamp", "cheeps", ["author_id", "timestamp"],
    )

    op.create_table(
        "follows",
        sa.Column(
            "follower_id", sa.Integer,
            sa.ForeignKey("authors.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column(
            "following_id", sa.Integer,
            sa.ForeignKey("authors.id", ondelete="CASCADE"), primary_key=True,
        ),
    )
    op.create_index("ix_follows_following_id", "follows", ["following_id"])


def downgrade() -> None:
    op.drop_table("follows")
    op.drop_table("cheeps")
    op.drop_table("authors")
