"""Author Repository — author lifecycle, lookups, and the follow graph.

Invariants:
    - create_author inserts the author AND its self-follow edge in one commit
    - remove_author deletes cheeps, follow edges, then the author in one commit
    - Every failed mutation leaves the store unchanged (rollback before raising)
    - Existence checks never raise

Design Decisions:
    - Explicit AsyncSession handle per repository instance: the caller owns the
      session scope (see DatabaseSessionManager.session())
    - Name checked before insert for a precise DuplicateNameError; the store's unique
      constraints still back both name and email
    - The self-follow edge cannot be removed through unfollow_author: the followed
      timeline relies on it to include an author's own cheeps
"""

import logging

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from chirp.core.arguments import require
from chirp.core.errors import (
    DuplicateEmailError, DuplicateNameError, ErrorContext, NotFoundError,
    ValidationError,
)
from chirp.core.view_models import AuthorViewModel, to_author_view_model
from chirp.models import Author, Cheep, Follow

logger = logging.getLogger(__name__)


async def get_author_or_raise(db: AsyncSession, name: str) -> Author:
    """Load an author by name or raise NotFoundError. Shared with CheepRepository."""
    require(name, "author_name")
    result = await db.execute(select(Author).where(Author.name == name))
    author = result.scalar_one_or_none()
    if author is None:
        raise NotFoundError("Author", name, ErrorContext(author_name=name))
    return author


class AuthorRepository:
    """Author persistence backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_author(self, name: str, email: str) -> None:
        """Create an author that follows themselves."""
        require(name, "name")
        require(email, "email")
        if await self.does_user_name_exist(name):
            logger.warning("Author name already taken", extra={"author": name})
            raise DuplicateNameError(name, ErrorContext(author_name=name))

        author = Author(name=name, email=email)
        self.db.add(author)
        try:
            await self.db.flush()
            self.db.add(Follow(follower_id=author.id, following_id=author.id))
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            # lost a race on name, or the email is taken
            if await self.does_user_name_exist(name):
                raise DuplicateNameError(name, ErrorContext(author_name=name))
            logger.warning("Author email already taken", extra={"author": name})
            raise DuplicateEmailError(email, ErrorContext(author_name=name))
        logger.info("Author created", extra={"author": name})

    async def remove_author(self, name: str) -> None:
        """Remove an author together with all of their cheeps and follow edges."""
        author = await get_author_or_raise(self.db, name)
        await self.db.execute(delete(Cheep).where(Cheep.author_id == author.id))
        await self.db.execute(
            delete(Follow).where(
                or_(
                    Follow.follower_id == author.id,
                    Follow.following_id == author.id,
                ),
            ),
        )
        await self.db.delete(author)
        await self.db.commit()
        logger.info("Author removed", extra={"author": name})

    async def find_author_by_name(self, name: str) -> AuthorViewModel:
        author = await get_author_or_raise(self.db, name)
        return to_author_view_model(author)

    async def find_author_by_email(self, email: str) -> AuthorViewModel:
        require(email, "email")
        result = await self.db.execute(select(Author).where(Author.email == email))
        author = result.scalar_one_or_none()
        if author is None:
            raise NotFoundError("Author with email", email)
        return to_author_view_model(author)

    async def does_user_name_exist(self, name: str) -> bool:
        result = await self.db.execute(select(Author.id).where(Author.name == name))
        return result.scalar_one_or_none() is not None

    async def does_user_email_exist(self, email: str) -> bool:
        result = await self.db.execute(select(Author.id).where(Author.email == email))
        return result.scalar_one_or_none() is not None

    # ─── Follow graph ───────────────────────────────────────────

    async def follow_author(self, follower_name: str, followee_name: str) -> None:
        """Add a follow edge. Following someone twice is a no-op."""
        follower = await get_author_or_raise(self.db, follower_name)
        followee = await get_author_or_raise(self.db, followee_name)
        if await self.db.get(Follow, (follower.id, followee.id)) is not None:
            return
        self.db.add(Follow(follower_id=follower.id, following_id=followee.id))
        await self.db.commit()
        logger.info(
            "Author %s now follows %s", follower_name, followee_name,
            extra={"author": follower_name},
        )

    async def unfollow_author(self, follower_name: str, followee_name: str) -> None:
        """Remove a follow edge. Unfollowing someone not followed is a no-op."""
        follower = await get_author_or_raise(self.db, follower_name)
        followee = await get_author_or_raise(self.db, followee_name)
        if follower.id == followee.id:
            raise ValidationError(
                "Authors cannot unfollow themselves", "followee_name",
                ErrorContext(author_name=follower_name),
            )
        edge = await self.db.get(Follow, (follower.id, followee.id))
        if edge is None:
            return
        await self.db.delete(edge)
        await self.db.commit()
        logger.info(
            "Author %s unfollowed %s", follower_name, followee_name,
            extra={"author": follower_name},
        )

    async def is_following(self, follower_name: str, followee_name: str) -> bool:
        follower = await get_author_or_raise(self.db, follower_name)
        followee = await get_author_or_raise(self.db, followee_name)
        return await self.db.get(Follow, (follower.id, followee.id)) is not None

    async def get_followed_names(self, name: str) -> list[str]:
        """Names of every author `name` follows, themselves included."""
        author = await get_author_or_raise(self.db, name)
        result = await self.db.execute(
            select(Author.name)
            .join(Follow, Follow.following_id == Author.id)
            .where(Follow.follower_id == author.id)
            .order_by(Author.name),
        )
        return list(result.scalars().all())
