"""
Reports API Endpoints
Dashboard KPIs, the daily report and its CSV export, branch comparison,
top products, delivery platform stats and the recent-activity feed.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from caffissimo.database import DataStore, get_store
from caffissimo.dependencies import get_scope, get_session_context, require_permission
from caffissimo.models import OrderSource, PaymentMethod
from caffissimo.schemas.reports import (
    ActivityItem,
    BranchRollup,
    DailyReport,
    PlatformStats,
    ProductRollup,
    SalesSummary,
)
from caffissimo.schemas.scope import SalesScope, ScopeResponse, SessionContext
from caffissimo.services.report_service import report_service
from caffissimo.services.scope_resolver import resolve_session_branch

router = APIRouter()


@router.get("/scope", response_model=ScopeResponse)
async def get_effective_scope(
    session: SessionContext = Depends(get_session_context),
    scope: SalesScope = Depends(get_scope),
):
    """Branch and date window every other report will use for this session"""
    return ScopeResponse(
        role=str(getattr(session.role, "value", session.role)),
        branch_id=scope.branch_id,
        date_from=scope.interval.date_from,
        date_to=scope.interval.date_to,
        days=list(scope.interval.days()),
    )


@router.get("/summary", response_model=SalesSummary)
async def get_sales_summary(
    session: SessionContext = Depends(require_permission("page:admin")),
    scope: SalesScope = Depends(get_scope),
    store: DataStore = Depends(get_store),
):
    return report_service.sales_summary(store, scope)


@router.get("/daily", response_model=DailyReport)
async def get_daily_report(
    session: SessionContext = Depends(require_permission("page:reports")),
    scope: SalesScope = Depends(get_scope),
    store: DataStore = Depends(get_store),
    source: Optional[OrderSource] = Query(None),
    payment_method: Optional[PaymentMethod] = Query(None),
):
    return report_service.daily_report(store, scope, source=source, payment_method=payment_method)


@router.get("/daily.csv")
async def export_daily_report(
    session: SessionContext = Depends(require_permission("page:reports")),
    scope: SalesScope = Depends(get_scope),
    store: DataStore = Depends(get_store),
    source: Optional[OrderSource] = Query(None),
    payment_method: Optional[PaymentMethod] = Query(None),
):
    """Daily report as CSV"""
    buckets = report_service.daily_series(store, scope, source=source, payment_method=payment_method)
    body = report_service.export_daily_series_csv(buckets)
    filename = f"sales-{scope.interval.date_from:%Y%m%d}-{scope.interval.date_to:%Y%m%d}.csv"
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/branch-comparison", response_model=List[BranchRollup])
async def get_branch_comparison(
    session: SessionContext = Depends(require_permission("report:branch_comparison")),
    scope: SalesScope = Depends(get_scope),
    store: DataStore = Depends(get_store),
):
    """Every branch ranked by revenue over the session's date window"""
    return report_service.branch_comparison(store, scope.interval)


@router.get("/top-products", response_model=List[ProductRollup])
async def get_top_products(
    session: SessionContext = Depends(require_permission("page:admin")),
    scope: SalesScope = Depends(get_scope),
    store: DataStore = Depends(get_store),
    limit: Optional[int] = Query(None, ge=0, le=100),
):
    return report_service.top_products(store, scope, limit)


@router.get("/platform-stats", response_model=List[PlatformStats])
async def get_platform_stats(
    session: SessionContext = Depends(require_permission("page:admin")),
    scope: SalesScope = Depends(get_scope),
    store: DataStore = Depends(get_store),
):
    return report_service.platform_stats(store, scope)


@router.get("/recent-activity", response_model=List[ActivityItem])
async def get_recent_activity(
    session: SessionContext = Depends(require_permission("page:admin")),
    store: DataStore = Depends(get_store),
):
    """Latest orders and audit entries for the dashboard feed"""
    return report_service.recent_activity(store, resolve_session_branch(session), session.role)
