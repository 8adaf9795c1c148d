"""Route Dependencies — repositories bound to the request-scoped session.

Design Decisions:
    - Routes depend on the repository protocols, so tests can swap in fakes
      through app.dependency_overrides
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from chirp.core import repository_protocols as contracts
from chirp.infrastructure.database import get_db
from chirp.repositories import AuthorRepository, CheepRepository


def get_author_repository(
    db: AsyncSession = Depends(get_db),
) -> contracts.AuthorRepository:
    return AuthorRepository(db)


def get_cheep_repository(
    db: AsyncSession = Depends(get_db),
) -> contracts.CheepRepository:
    return CheepRepository(db)
