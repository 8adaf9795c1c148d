"""Repositories — data-access components over an AsyncSession.

Invariants:
    - Repositories return view models, never ORM entities
    - Domain errors (chirp.core.errors) propagate to the caller unchanged

Design Decisions:
    - One repository per aggregate: authors (with the follow graph) and cheeps
"""

from chirp.repositories.author_repository import AuthorRepository  # noqa: F401
from chirp.repositories.cheep_repository import CheepRepository  # noqa: F401
