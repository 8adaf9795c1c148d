"""Author Routes — registration, removal, author timelines, and following.

Invariants:
    - Cheep timestamps are assigned by the server (UTC now), never by the client
    - Unknown authors surface as 404 through NotFoundError
    - Duplicate names/emails surface as 409 through DuplicateError

Design Decisions:
    - /timeline is the followed timeline (own cheeps included via the self-follow edge);
      /cheeps is the author's own timeline
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query, status

from chirp.api.dependencies import get_author_repository, get_cheep_repository
from chirp.core.repository_protocols import AuthorRepository, CheepRepository
from chirp.schemas.author import (
    AuthorCreate, AuthorResponse, FollowRequest, FollowingResponse,
)
from chirp.schemas.cheep import CheepCreate, CheepCreated, CheepPage, CheepResponse

router = APIRouter(prefix="/api/v1/authors", tags=["authors"])


@router.post(
    "", response_model=AuthorResponse, status_code=status.HTTP_201_CREATED,
)
async def create_author(
    body: AuthorCreate,
    authors: AuthorRepository = Depends(get_author_repository),
):
    await authors.create_author(body.name, body.email)
    return AuthorResponse(name=body.name, email=body.email)


@router.get("/{name}", response_model=AuthorResponse)
async def get_author(
    name: str, authors: AuthorRepository = Depends(get_author_repository),
):
    return AuthorResponse.model_validate(await authors.find_author_by_name(name))


@router.delete("/{name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_author(
    name: str, authors: AuthorRepository = Depends(get_author_repository),
):
    """Remove the author and every cheep they wrote."""
    await authors.remove_author(name)


@router.get("/{name}/cheeps", response_model=CheepPage)
async def get_author_timeline(
    name: str,
    page: int = Query(1),
    cheeps: CheepRepository = Depends(get_cheep_repository),
):
    items = await cheeps.get_page_of_cheeps_by_author(name, page)
    return CheepPage(
        cheeps=[CheepResponse.model_validate(c) for c in items],
        page=page,
        page_count=await cheeps.get_cheep_page_amount_author(name),
    )


@router.post(
    "/{name}/cheeps", response_model=CheepCreated,
    status_code=status.HTTP_201_CREATED,
)
async def post_cheep(
    name: str,
    body: CheepCreate,
    cheeps: CheepRepository = Depends(get_cheep_repository),
):
    cheep_id = await cheeps.create_cheep(
        name, body.text, datetime.now(timezone.utc),
    )
    return CheepCreated(cheep_id=cheep_id)


@router.get("/{name}/timeline", response_model=CheepPage)
async def get_followed_timeline(
    name: str,
    page: int = Query(1),
    cheeps: CheepRepository = Depends(get_cheep_repository),
):
    """Cheeps from everyone the author follows, themselves included."""
    items = await cheeps.get_page_of_cheeps_by_followed(name, page)
    return CheepPage(
        cheeps=[CheepResponse.model_validate(c) for c in items],
        page=page,
        page_count=await cheeps.get_cheep_page_amount_followed(name),
    )


@router.get("/{name}/following", response_model=FollowingResponse)
async def get_following(
    name: str, authors: AuthorRepository = Depends(get_author_repository),
):
    return FollowingResponse(
        author=name, following=await authors.get_followed_names(name),
    )


@router.post("/{name}/following", status_code=status.HTTP_204_NO_CONTENT)
async def follow(
    name: str,
    body: FollowRequest,
    authors: AuthorRepository = Depends(get_author_repository),
):
    await authors.follow_author(name, body.name)


@router.delete(
    "/{name}/following/{followee}", status_code=status.HTTP_204_NO_CONTENT,
)
async def unfollow(
    name: str,
    followee: str,
    authors: AuthorRepository = Depends(get_author_repository),
):
    await authors.unfollow_author(name, followee)
