"""
Global Search API Endpoint
"""
from fastapi import APIRouter, Depends, Query

from caffissimo.database import DataStore, get_store
from caffissimo.dependencies import require_permission
from caffissimo.schemas.scope import SessionContext
from caffissimo.schemas.search import SearchResults
from caffissimo.services.scope_resolver import resolve_session_branch
from caffissimo.services.search_service import search_service

router = APIRouter()


@router.get("/", response_model=SearchResults)
async def global_search(
    q: str = Query("", max_length=200),
    session: SessionContext = Depends(require_permission("page:admin")),
    store: DataStore = Depends(get_store),
):
    return search_service.search(store, q, resolve_session_branch(session), role=session.role)
