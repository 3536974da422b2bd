"""
Guest-facing API routes
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from app.core.config import settings
from app.core.store import get_guest_repo
from app.schemas.guest import GuestResponse, SearchResults
from app.services.repositories import GuestListRepo
from app.services.search_service import SearchService
from app.utils.responses import success_response

router = APIRouter()

def build_search_results(repo: GuestListRepo, query: str, limit: int) -> SearchResults:
    """Run a search and cut the matches down to what will be displayed"""
    matches = SearchService.search(repo.all(), query)
    shown = matches[:limit]
    return SearchResults(
        query=query,
        total=len(matches),
        truncated=len(matches) > len(shown),
        results=[
            GuestResponse(
                name=guest.name,
                table=guest.table,
                copy_text=SearchService.copy_text(guest)
            )
            for guest in shown
        ]
    )

@router.get("/search")
async def search_guests(
    q: str = "",
    limit: Optional[int] = Query(None, ge=1),
    repo: GuestListRepo = Depends(get_guest_repo)
):
    """Find a guest's table by name"""
    if limit is None:
        limit = settings.MAX_DISPLAY_RESULTS
    
    results = build_search_results(repo, q, limit)
    
    if q and results.total == 0:
        message = "No encontramos ese nombre. Revisa la ortografía o acércate al personal."
    else:
        message = "Search completed"
    
    return success_response(
        message=message,
        data=results.model_dump()
    )
