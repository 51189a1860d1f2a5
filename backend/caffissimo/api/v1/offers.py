"""
Offers API Endpoints
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from caffissimo.database import DataStore, get_store
from caffissimo.dependencies import require_permission
from caffissimo.schemas.operations import OfferResponse
from caffissimo.schemas.scope import SessionContext
from caffissimo.services.offer_service import offer_service
from caffissimo.services.scope_resolver import resolve_session_branch

router = APIRouter()


@router.get("/", response_model=List[OfferResponse])
async def list_offers(
    session: SessionContext = Depends(require_permission("page:admin")),
    store: DataStore = Depends(get_store),
    offer_status: Optional[str] = Query(None, alias="status", pattern="^(inactive|scheduled|expired|active)$"),
):
    return offer_service.list_offers(store, resolve_session_branch(session), status=offer_status)
