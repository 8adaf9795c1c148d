"""Boundary Protocols — contracts for the author and cheep access components.

Invariants:
    - Core NEVER imports from repositories/ — dependency arrows point inward only
    - Every method is async because implementations do IO

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
"""

from datetime import datetime
from typing import Protocol

from chirp.core.domain_types import CheepId
from chirp.core.view_models import AuthorViewModel, CheepViewModel


class AuthorRepository(Protocol):
    """Contract for author persistence and the follow graph."""
    async def create_author(self, name: str, email: str) -> None: ...
    async def remove_author(self, name: str) -> None: ...
    async def find_author_by_name(self, name: str) -> AuthorViewModel: ...
    async def find_author_by_email(self, email: str) -> AuthorViewModel: ...
    async def does_user_name_exist(self, name: str) -> bool: ...
    async def does_user_email_exist(self, email: str) -> bool: ...
    async def follow_author(self, follower_name: str, followee_name: str) -> None: ...
    async def unfollow_author(self, follower_name: str, followee_name: str) -> None: ...
    async def is_following(self, follower_name: str, followee_name: str) -> bool: ...
    async def get_followed_names(self, name: str) -> list[str]: ...


class CheepRepository(Protocol):
    """Contract for cheep persistence and timeline queries."""
    async def get_page_of_cheeps_by_author(
        self, author_name: str, page: int,
    ) -> list[CheepViewModel]: ...
    async def get_page_of_cheeps_by_followed(
        self, author_name: str, page: int,
    ) -> list[CheepViewModel]: ...
    async def get_page_of_cheeps(self, page: int) -> list[CheepViewModel]: ...
    async def get_cheep_page_amount_all(self) -> int: ...
    async def get_cheep_page_amount_author(self, author_name: str) -> int: ...
    async def get_cheep_page_amount_followed(self, author_name: str) -> int: ...
    async def get_cheeps_by_author(self, author_name: str) -> list[CheepViewModel]: ...
    async def create_cheep(
        self, author_name: str, text: str, timestamp: datetime,
    ) -> CheepId: ...
    async def remove_cheep(self, cheep_id: int) -> None: ...
