"""
External Platforms API Endpoints
Uber Eats / DoorDash revenue that arrives outside tracked orders.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from caffissimo.database import DataStore, get_store
from caffissimo.dependencies import get_scope, require_permission
from caffissimo.models import ExternalSalesEntry, Platform
from caffissimo.schemas.platforms import (
    ExternalSalesCreate,
    ExternalSalesImportRequest,
    ExternalSalesImportResult,
    ExternalSalesListResponse,
)
from caffissimo.schemas.scope import SalesScope, SessionContext
from caffissimo.services.errors import ExternalSalesImportError
from caffissimo.services.platform_service import platform_service
from caffissimo.services.report_service import report_service

router = APIRouter()


@router.get("/entries", response_model=ExternalSalesListResponse)
async def list_external_sales(
    session: SessionContext = Depends(require_permission("page:admin")),
    scope: SalesScope = Depends(get_scope),
    store: DataStore = Depends(get_store),
    platform: Optional[Platform] = Query(None),
):
    entries = store.list_external_sales_entries(
        branch_id=scope.branch_id,
        interval=scope.interval,
        platform=platform.value if platform else None,
    )
    entries = sorted(entries, key=lambda e: e.date, reverse=True)
    return ExternalSalesListResponse(
        entries=entries,
        total=len(entries),
        stats=report_service.platform_stats(store, scope),
    )


@router.post("/entries", response_model=ExternalSalesEntry, status_code=201)
async def create_external_sales_entry(
    data: ExternalSalesCreate,
    session: SessionContext = Depends(require_permission("page:admin")),
    store: DataStore = Depends(get_store),
):
    try:
        return platform_service.add_entry(store, session, data)
    except ExternalSalesImportError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/import", response_model=ExternalSalesImportResult, status_code=201)
async def import_external_sales(
    data: ExternalSalesImportRequest,
    session: SessionContext = Depends(require_permission("page:admin")),
    store: DataStore = Depends(get_store),
):
    """
    Import daily platform totals from CSV text.
    Header must be date,total_sales,order_count. Unparseable rows are skipped.
    """
    try:
        return platform_service.import_csv(store, session, data.platform, data.csv_text, data.branch_id)
    except ExternalSalesImportError as e:
        raise HTTPException(status_code=400, detail=str(e))
