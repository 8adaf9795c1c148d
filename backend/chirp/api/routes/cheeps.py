"""Public Timeline — global cheep pages and cheep removal.

Invariants:
    - page is validated by the repository (page < 1 → 400 via ValidationError)
"""

from fastapi import APIRouter, Depends, Query, status

from chirp.api.dependencies import get_cheep_repository
from chirp.core.repository_protocols import CheepRepository
from chirp.schemas.cheep import CheepPage, CheepResponse

router = APIRouter(prefix="/api/v1/cheeps", tags=["cheeps"])


@router.get("", response_model=CheepPage)
async def get_public_timeline(
    page: int = Query(1),
    cheeps: CheepRepository = Depends(get_cheep_repository),
):
    """One page of the public timeline, newest first."""
    items = await cheeps.get_page_of_cheeps(page)
    return CheepPage(
        cheeps=[CheepResponse.model_validate(c) for c in items],
        page=page,
        page_count=await cheeps.get_cheep_page_amount_all(),
    )


@router.delete("/{cheep_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_cheep(
    cheep_id: int,
    cheeps: CheepRepository = Depends(get_cheep_repository),
):
    await cheeps.remove_cheep(cheep_id)
