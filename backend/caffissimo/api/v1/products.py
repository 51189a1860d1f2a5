"""
Products API Endpoints
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from caffissimo.database import DataStore, get_store
from caffissimo.dependencies import require_permission
from caffissimo.models import Category
from caffissimo.schemas.catalog import ProductListItem
from caffissimo.schemas.scope import SessionContext
from caffissimo.services.catalog_service import catalog_service
from caffissimo.services.scope_resolver import resolve_session_branch

router = APIRouter()


@router.get("/", response_model=List[ProductListItem])
async def list_products(
    session: SessionContext = Depends(require_permission("page:admin")),
    store: DataStore = Depends(get_store),
    category_id: Optional[str] = Query(None),
    include_unavailable: bool = Query(False),
    search: Optional[str] = Query(None),
):
    return catalog_service.list_products(
        store,
        resolve_session_branch(session),
        category_id=category_id,
        include_unavailable=include_unavailable,
        search=search,
    )


@router.get("/categories", response_model=List[Category])
async def list_categories(
    session: SessionContext = Depends(require_permission("page:admin")),
    store: DataStore = Depends(get_store),
):
    return store.list_categories()
