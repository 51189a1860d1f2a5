"""
Order Service
Listing and status lifecycle for tracked orders.

Lifecycle: pending -> confirmed -> preparing -> ready -> completed, one step
at a time. Any non-terminal order may be cancelled. Completed and cancelled
orders are never changed again. Delivery-platform orders are read-only
except for cancellation.
"""
import logging
from datetime import datetime
from typing import List, Optional

from caffissimo.database import DataStore
from caffissimo.models import AuditAction, Order, OrderSource, OrderStatus, StatusHistoryEntry
from caffissimo.schemas.scope import SalesScope, SessionContext
from caffissimo.services.access_policy import can_cancel_orders
from caffissimo.services.audit_service import audit_service
from caffissimo.services.errors import (
    InvalidStatusTransitionError,
    OrderCancellationError,
    OrderNotFoundError,
    PermissionDeniedError,
)
from caffissimo.services.scope_resolver import resolve_session_branch
from caffissimo.utils.timezone_helpers import utcnow

logger = logging.getLogger(__name__)

STATUS_FLOW = [
    OrderStatus.PENDING,
    OrderStatus.CONFIRMED,
    OrderStatus.PREPARING,
    OrderStatus.READY,
    OrderStatus.COMPLETED,
]

TERMINAL_STATUSES = (OrderStatus.COMPLETED, OrderStatus.CANCELLED)


def next_status(status: OrderStatus) -> Optional[OrderStatus]:
    """The single forward step from `status`, or None at the end of the flow."""
    if status not in STATUS_FLOW:
        return None
    idx = STATUS_FLOW.index(status)
    return STATUS_FLOW[idx + 1] if idx + 1 < len(STATUS_FLOW) else None


def _matches(order: Order, q: str) -> bool:
    return (
        q in order.order_number.lower()
        or q in order.id.lower()
        or (order.customer_name is not None and q in order.customer_name.lower())
        or (order.customer_email is not None and q in order.customer_email.lower())
    )


class OrderService:

    def list_orders(
        self,
        store: DataStore,
        scope: SalesScope,
        source: Optional[OrderSource] = None,
        status: Optional[OrderStatus] = None,
        search: Optional[str] = None,
    ) -> List[Order]:
        """Orders in scope, newest first."""
        orders = store.list_orders(
            branch_id=scope.branch_id,
            interval=scope.interval,
            source=source.value if source else None,
            status=status.value if status else None,
        )
        if search:
            q = search.strip().lower()
            orders = [o for o in orders if _matches(o, q)]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def get_order(self, store: DataStore, order_id: str, session: SessionContext) -> Order:
        """Fetch one order; orders outside the session's branch look missing."""
        order = store.get_order(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        branch_id = resolve_session_branch(session)
        if branch_id is not None and order.branch_id != branch_id:
            raise OrderNotFoundError(order_id)
        return order

    def transition(
        self,
        store: DataStore,
        order_id: str,
        new_status: OrderStatus,
        session: SessionContext,
        note: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Order:
        if new_status == OrderStatus.CANCELLED:
            return self.cancel(store, order_id, session, reason=note, now=now)

        order = self.get_order(store, order_id, session)
        if order.status in TERMINAL_STATUSES:
            raise InvalidStatusTransitionError(
                f"Order {order.order_number} is {order.status.value} and can no longer change"
            )
        if order.is_read_only:
            raise InvalidStatusTransitionError(
                f"Order {order.order_number} is managed by {order.source.value} and is read-only"
            )
        expected = next_status(order.status)
        if new_status != expected:
            raise InvalidStatusTransitionError(
                f"Cannot move order {order.order_number} from {order.status.value} to {new_status.value}"
            )

        updated = self._apply(store, order, new_status, note, now or utcnow())
        logger.info("Order %s moved %s -> %s", order.id, order.status.value, new_status.value)
        return updated

    def cancel(
        self,
        store: DataStore,
        order_id: str,
        session: SessionContext,
        reason: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Order:
        if not can_cancel_orders(session.role):
            raise PermissionDeniedError("feature:cancel_orders")

        order = self.get_order(store, order_id, session)
        if order.status in TERMINAL_STATUSES:
            raise OrderCancellationError(
                f"Order {order.order_number} is already {order.status.value}"
            )

        updated = self._apply(store, order, OrderStatus.CANCELLED, reason, now or utcnow())
        audit_service.record(
            store,
            session,
            AuditAction.ORDER_CANCELLED,
            entity_type="Order",
            entity_id=order.id,
            branch_id=order.branch_id,
            details={"orderId": order.id, "orderNumber": order.order_number, "reason": reason or ""},
        )
        logger.info("Order %s cancelled (was %s)", order.id, order.status.value)
        return updated

    def _apply(
        self, store: DataStore, order: Order, status: OrderStatus, note: Optional[str], now: datetime
    ) -> Order:
        history = list(order.status_history) + [StatusHistoryEntry(status=status, timestamp=now, note=note)]
        updated = order.model_copy(update={
            "status": status,
            "status_history": history,
            "updated_at": now,
        })
        return store.replace_order(updated)


# Singleton
order_service = OrderService()
