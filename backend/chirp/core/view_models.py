"""View Models — flat, read-only display records projected from ORM entities.

Invariants:
    - Projection is pure: no IO, no validation beyond what the query guaranteed
    - View models are never persisted; they are rebuilt on every query
    - Timestamps are always timezone-aware (naive values are taken as UTC)

Design Decisions:
    - Frozen dataclasses over Pydantic: core stays free of boundary libraries
    - Duck-typed entity arguments: core does not import the ORM models
"""

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class AuthorViewModel:
    name: str
    email: str


@dataclass(frozen=True)
class CheepViewModel:
    author: str
    text: str
    timestamp: datetime
    cheep_id: int


def as_utc(value: datetime) -> datetime:
    """Normalize to UTC. Naive values are taken as UTC (SQLite drops tzinfo on read)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_author_view_model(author) -> AuthorViewModel:
    return AuthorViewModel(name=author.name, email=author.email)


def to_cheep_view_model(cheep, author_name: str) -> CheepViewModel:
    return CheepViewModel(
        author=author_name,
        text=cheep.text,
        timestamp=as_utc(cheep.timestamp),
        cheep_id=cheep.id,
    )
