"""Cheep Repository — cheep lifecycle and paginated timeline queries.

Invariants:
    - Pages are 1-based, PAGE_SIZE rows each, newest first (timestamp DESC, id DESC)
    - Page counts use the same filter as the matching page query
    - The followed timeline is every cheep whose author the given author follows;
      it includes the author's own cheeps only through the self-follow edge
    - Every mutation commits exactly once

Design Decisions:
    - One base select (Cheep joined to Author.name) shared by all timeline queries:
      projection needs the author's name and never loads relationships
    - cheep id as secondary sort key: stable pages when timestamps collide
"""

import logging
from datetime import datetime

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from chirp.core.arguments import require
from chirp.core.domain_types import CheepId
from chirp.core.errors import ErrorContext, NotFoundError
from chirp.core.pagination import PAGE_SIZE, check_page_number, page_count, skip_count
from chirp.core.view_models import CheepViewModel, as_utc, to_cheep_view_model
from chirp.models import Author, Cheep, Follow
from chirp.repositories.author_repository import get_author_or_raise

logger = logging.getLogger(__name__)


def _timeline_query() -> Select:
    return select(Cheep, Author.name).join(Author, Cheep.author_id == Author.id)


def _newest_first(query: Select) -> Select:
    return query.order_by(Cheep.timestamp.desc(), Cheep.id.desc())


def _followed_by(author_id: int):
    """Filter clause: cheep's author is followed by author_id."""
    return Cheep.author_id.in_(
        select(Follow.following_id).where(Follow.follower_id == author_id),
    )


class CheepRepository:
    """Cheep persistence backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _fetch(self, query: Select) -> list[CheepViewModel]:
        result = await self.db.execute(query)
        return [to_cheep_view_model(cheep, name) for cheep, name in result.all()]

    async def _fetch_page(self, query: Select, page: int) -> list[CheepViewModel]:
        return await self._fetch(
            _newest_first(query).offset(skip_count(page)).limit(PAGE_SIZE),
        )

    async def _count_pages(self, *criteria) -> int:
        result = await self.db.execute(
            select(func.count(Cheep.id)).where(*criteria),
        )
        return page_count(result.scalar_one())

    # ─── Timelines ───────────────────────────────────────────────

    async def get_page_of_cheeps_by_author(
        self, author_name: str, page: int,
    ) -> list[CheepViewModel]:
        """A page of cheeps written by author_name."""
        require(author_name, "author_name")
        check_page_number(page)
        author = await get_author_or_raise(self.db, author_name)
        return await self._fetch_page(
            _timeline_query().where(Cheep.author_id == author.id), page,
        )

    async def get_page_of_cheeps_by_followed(
        self, author_name: str, page: int,
    ) -> list[CheepViewModel]:
        """A page of cheeps written by the authors author_name follows."""
        require(author_name, "author_name")
        check_page_number(page)
        author = await get_author_or_raise(self.db, author_name)
        return await self._fetch_page(
            _timeline_query().where(_followed_by(author.id)), page,
        )

    async def get_page_of_cheeps(self, page: int) -> list[CheepViewModel]:
        """A page of the public timeline."""
        check_page_number(page)
        return await self._fetch_page(_timeline_query(), page)

    async def get_cheeps_by_author(self, author_name: str) -> list[CheepViewModel]:
        """Every cheep written by author_name, newest first."""
        author = await get_author_or_raise(self.db, author_name)
        return await self._fetch(
            _newest_first(_timeline_query().where(Cheep.author_id == author.id)),
        )

    # ─── Page counts ─────────────────────────────────────────────

    async def get_cheep_page_amount_all(self) -> int:
        return await self._count_pages()

    async def get_cheep_page_amount_author(self, author_name: str) -> int:
        author = await get_author_or_raise(self.db, author_name)
        return await self._count_pages(Cheep.author_id == author.id)

    async def get_cheep_page_amount_followed(self, author_name: str) -> int:
        author = await get_author_or_raise(self.db, author_name)
        return await self._count_pages(_followed_by(author.id))

    # ─── Mutations ───────────────────────────────────────────────

    async def create_cheep(
        self, author_name: str, text: str, timestamp: datetime,
    ) -> CheepId:
        """Post a cheep for an existing author. Naive timestamps are taken as UTC."""
        require(author_name, "author_name")
        require(text, "text")
        require(timestamp, "timestamp")
        author = await get_author_or_raise(self.db, author_name)

        cheep = Cheep(author_id=author.id, text=text, timestamp=as_utc(timestamp))
        self.db.add(cheep)
        await self.db.flush()
        cheep_id = CheepId(cheep.id)
        await self.db.commit()
        logger.info(
            "Cheep created", extra={"author": author_name, "cheep_id": cheep_id},
        )
        return cheep_id

    async def remove_cheep(self, cheep_id: int) -> None:
        cheep = await self.db.get(Cheep, cheep_id)
        if cheep is None:
            raise NotFoundError("Cheep", str(cheep_id), ErrorContext(cheep_id=cheep_id))
        await self.db.delete(cheep)
        await self.db.commit()
        logger.info("Cheep removed", extra={"cheep_id": cheep_id})
