"""
Orders API Endpoints
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from caffissimo.config import settings
from caffissimo.database import DataStore, get_store
from caffissimo.dependencies import get_scope, require_permission
from caffissimo.models import Order, OrderSource, OrderStatus
from caffissimo.schemas.orders import OrderCancelRequest, OrderListResponse, OrderStatusUpdate
from caffissimo.schemas.scope import SalesScope, SessionContext
from caffissimo.services.errors import (
    InvalidStatusTransitionError,
    OrderCancellationError,
    OrderNotFoundError,
    PermissionDeniedError,
)
from caffissimo.services.order_service import order_service

router = APIRouter()


@router.get("/", response_model=OrderListResponse)
async def list_orders(
    session: SessionContext = Depends(require_permission("page:admin")),
    scope: SalesScope = Depends(get_scope),
    store: DataStore = Depends(get_store),
    source: Optional[OrderSource] = Query(None),
    order_status: Optional[OrderStatus] = Query(None, alias="status"),
    search: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
):
    orders = order_service.list_orders(store, scope, source=source, status=order_status, search=search)
    start = (page - 1) * page_size
    return OrderListResponse(
        orders=orders[start:start + page_size],
        total=len(orders),
        page=page,
        page_size=page_size,
    )


@router.get("/{order_id}", response_model=Order)
async def get_order(
    order_id: str,
    session: SessionContext = Depends(require_permission("page:admin")),
    store: DataStore = Depends(get_store),
):
    try:
        return order_service.get_order(store, order_id, session)
    except OrderNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.patch("/{order_id}/status", response_model=Order)
async def update_order_status(
    order_id: str,
    data: OrderStatusUpdate,
    session: SessionContext = Depends(require_permission("page:admin")),
    store: DataStore = Depends(get_store),
):
    """Advance an order one step, or cancel it"""
    try:
        return order_service.transition(store, order_id, data.status, session, note=data.note)
    except OrderNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except (InvalidStatusTransitionError, OrderCancellationError) as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/{order_id}/cancel", response_model=Order)
async def cancel_order(
    order_id: str,
    data: Optional[OrderCancelRequest] = None,
    session: SessionContext = Depends(require_permission("feature:cancel_orders")),
    store: DataStore = Depends(get_store),
):
    reason = data.reason if data else None
    try:
        return order_service.cancel(store, order_id, session, reason=reason)
    except OrderNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except OrderCancellationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
