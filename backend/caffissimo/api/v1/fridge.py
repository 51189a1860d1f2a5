"""
Fridge Stock API Endpoints
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from caffissimo.database import DataStore, get_store
from caffissimo.dependencies import get_scope, require_permission
from caffissimo.schemas.operations import FridgeReportCreate, FridgeReportResponse
from caffissimo.schemas.scope import SalesScope, SessionContext
from caffissimo.services.errors import FridgeReportError, PermissionDeniedError
from caffissimo.services.fridge_service import fridge_service

router = APIRouter()


@router.get("/", response_model=List[FridgeReportResponse])
async def list_fridge_reports(
    session: SessionContext = Depends(require_permission("page:admin")),
    scope: SalesScope = Depends(get_scope),
    store: DataStore = Depends(get_store),
    search: Optional[str] = Query(None),
):
    return fridge_service.list_reports(store, scope.branch_id, scope.interval, search=search)


@router.post("/", response_model=FridgeReportResponse, status_code=201)
async def submit_fridge_report(
    data: FridgeReportCreate,
    session: SessionContext = Depends(require_permission("feature:submit_fridge_report")),
    store: DataStore = Depends(get_store),
):
    try:
        return fridge_service.submit(store, session, data)
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except FridgeReportError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
