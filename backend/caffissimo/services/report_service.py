"""
Report Service
Pulls scoped collections from the data store and hands them to the pure
aggregation functions. This is the surface the dashboard and reports
routers call.
"""
import csv
import io
from typing import Any, List, Optional

from caffissimo.config import settings
from caffissimo.database import DataStore
from caffissimo.models import ACTION_LABELS, DELIVERY_SOURCES, OrderSource, PaymentMethod
from caffissimo.schemas.reports import (
    ActivityItem,
    BranchRollup,
    DailyBucket,
    DailyReport,
    PlatformStats,
    ProductRollup,
    SalesSummary,
)
from caffissimo.schemas.scope import DateInterval, SalesScope
from caffissimo.services import sales_aggregator
from caffissimo.services.access_policy import can_view_audit_logs

DAILY_CSV_COLUMNS = ["date", "pos", "ecommerce", "uber_eats", "doordash", "total", "order_count"]

RECENT_ORDERS = 5
RECENT_LOGS = 3
RECENT_ACTIVITY_LIMIT = 8


class ReportService:

    def _orders(
        self,
        store: DataStore,
        scope: SalesScope,
        source: Optional[OrderSource] = None,
        payment_method: Optional[PaymentMethod] = None,
    ):
        orders = store.list_orders(
            branch_id=scope.branch_id,
            interval=scope.interval,
            source=source.value if source else None,
        )
        if payment_method is not None:
            orders = [o for o in orders if o.payment_method == payment_method]
        return orders

    def _entries(
        self,
        store: DataStore,
        scope: SalesScope,
        source: Optional[OrderSource] = None,
        payment_method: Optional[PaymentMethod] = None,
    ):
        # platform entries carry no payment detail beyond "external"
        if payment_method is not None and payment_method != PaymentMethod.EXTERNAL:
            return []
        if source is not None and source not in DELIVERY_SOURCES:
            return []
        return store.list_external_sales_entries(
            branch_id=scope.branch_id,
            interval=scope.interval,
            platform=source.value if source else None,
        )

    def sales_summary(self, store: DataStore, scope: SalesScope) -> SalesSummary:
        return sales_aggregator.compute_sales_summary(scope, self._orders(store, scope), self._entries(store, scope))

    def daily_series(
        self,
        store: DataStore,
        scope: SalesScope,
        source: Optional[OrderSource] = None,
        payment_method: Optional[PaymentMethod] = None,
    ) -> List[DailyBucket]:
        return sales_aggregator.compute_daily_series(
            scope,
            self._orders(store, scope, source, payment_method),
            self._entries(store, scope, source, payment_method),
        )

    def daily_report(
        self,
        store: DataStore,
        scope: SalesScope,
        source: Optional[OrderSource] = None,
        payment_method: Optional[PaymentMethod] = None,
    ) -> DailyReport:
        orders = self._orders(store, scope, source, payment_method)
        entries = self._entries(store, scope, source, payment_method)
        return DailyReport(
            branch_id=scope.branch_id,
            summary=sales_aggregator.compute_sales_summary(scope, orders, entries),
            daily=sales_aggregator.compute_daily_series(scope, orders, entries),
        )

    def branch_comparison(self, store: DataStore, interval: DateInterval) -> List[BranchRollup]:
        return sales_aggregator.compute_branch_comparison(
            interval,
            store.list_branches(),
            store.list_orders(interval=interval),
            store.list_external_sales_entries(interval=interval),
        )

    def top_products(self, store: DataStore, scope: SalesScope, limit: Optional[int] = None) -> List[ProductRollup]:
        if limit is None:
            limit = settings.TOP_PRODUCTS_LIMIT
        return sales_aggregator.compute_top_products(scope, self._orders(store, scope), limit)

    def platform_stats(self, store: DataStore, scope: SalesScope) -> List[PlatformStats]:
        return sales_aggregator.compute_platform_stats(scope, self._orders(store, scope), self._entries(store, scope))

    def export_daily_series_csv(self, buckets: List[DailyBucket]) -> str:
        """Render daily buckets as CSV, money to two decimals."""
        out = io.StringIO()
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(DAILY_CSV_COLUMNS)
        for b in buckets:
            writer.writerow([
                b.date.isoformat(),
                f"{b.pos:.2f}",
                f"{b.ecommerce:.2f}",
                f"{b.uber_eats:.2f}",
                f"{b.doordash:.2f}",
                f"{b.total:.2f}",
                b.order_count,
            ])
        return out.getvalue()

    def recent_activity(
        self, store: DataStore, branch_id: Optional[str], role: Any, limit: int = RECENT_ACTIVITY_LIMIT
    ) -> List[ActivityItem]:
        """
        Newest orders merged with the newest audit entries, newest first.
        Audit entries only appear for roles that may view the audit log.
        """
        orders = sorted(store.list_orders(branch_id=branch_id), key=lambda o: o.created_at, reverse=True)
        items = [
            ActivityItem(
                id=o.id,
                type="order",
                title=f"Order {o.order_number}",
                subtitle=f"${o.total:,.2f} • {len(o.items)} {'item' if len(o.items) == 1 else 'items'}",
                source=o.source.value,
                status=o.status.value,
                timestamp=o.created_at,
            )
            for o in orders[:RECENT_ORDERS]
        ]
        if can_view_audit_logs(role):
            logs = sorted(store.list_audit_logs(branch_id=branch_id), key=lambda log: log.created_at, reverse=True)
            items += [
                ActivityItem(
                    id=log.id,
                    type="log",
                    title=ACTION_LABELS.get(log.action, log.action.value),
                    subtitle=f"by {log.user_name}",
                    timestamp=log.created_at,
                )
                for log in logs[:RECENT_LOGS]
            ]
        items.sort(key=lambda item: item.timestamp, reverse=True)
        return items[:limit]


# Singleton
report_service = ReportService()
