"""
Sales aggregation over orders and external platform sales entries.

Orders and external entries never describe the same transaction, so revenue
for a delivery platform is the plain sum of both collections. Cancelled
orders are counted but never contribute revenue. All functions are pure:
identical inputs give identical outputs, ties keep input order.
"""
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Sequence

from caffissimo.models.branch import Branch
from caffissimo.models.external_sales import ExternalSalesEntry, Platform
from caffissimo.models.order import Order, OrderSource, OrderStatus
from caffissimo.schemas.reports import (
    BranchRollup,
    DailyBucket,
    PlatformStats,
    ProductRollup,
    SalesSummary,
    SourceBreakdown,
)
from caffissimo.schemas.scope import DateInterval, SalesScope

SOURCE_KEYS = tuple(source.value for source in OrderSource)
PLATFORM_KEYS = tuple(platform.value for platform in Platform)


def _value(enum_or_str) -> str:
    return getattr(enum_or_str, "value", enum_or_str)


def _is_cancelled(order: Order) -> bool:
    return _value(order.status) == OrderStatus.CANCELLED.value


def order_in_scope(order: Order, scope: SalesScope) -> bool:
    if scope.branch_id is not None and order.branch_id != scope.branch_id:
        return False
    return scope.interval.contains(order.created_at)


def entry_in_scope(entry: ExternalSalesEntry, scope: SalesScope) -> bool:
    if scope.branch_id is not None and entry.branch_id != scope.branch_id:
        return False
    return scope.interval.contains_day(entry.date)


def filter_orders(orders: Iterable[Order], scope: SalesScope) -> List[Order]:
    return [o for o in orders if order_in_scope(o, scope)]


def filter_entries(entries: Iterable[ExternalSalesEntry], scope: SalesScope) -> List[ExternalSalesEntry]:
    return [e for e in entries if entry_in_scope(e, scope)]


def _source_revenue(orders: Iterable[Order], entries: Iterable[ExternalSalesEntry]) -> SourceBreakdown:
    """Per-source revenue of already-scoped records."""
    revenue: Dict[str, float] = {key: 0.0 for key in SOURCE_KEYS}
    for order in orders:
        if _is_cancelled(order):
            continue
        key = _value(order.source)
        if key in revenue:
            revenue[key] += order.total
    for entry in entries:
        key = _value(entry.platform)
        if key in PLATFORM_KEYS:
            revenue[key] += entry.total_sales
    return SourceBreakdown(**revenue)


def _summarise(orders: Sequence[Order], entries: Sequence[ExternalSalesEntry]) -> SalesSummary:
    by_source = _source_revenue(orders, entries)
    total_revenue = by_source.total
    cancelled_count = sum(1 for o in orders if _is_cancelled(o))
    order_count = len(orders) - cancelled_count
    return SalesSummary(
        total_revenue=total_revenue,
        by_source=by_source,
        order_count=order_count,
        cancelled_count=cancelled_count,
        avg_order_value=total_revenue / order_count if order_count else 0.0,
    )


def compute_sales_summary(
    scope: SalesScope,
    orders: Iterable[Order],
    entries: Iterable[ExternalSalesEntry],
) -> SalesSummary:
    return _summarise(filter_orders(orders, scope), filter_entries(entries, scope))


def compute_daily_series(
    scope: SalesScope,
    orders: Iterable[Order],
    entries: Iterable[ExternalSalesEntry],
) -> List[DailyBucket]:
    """One bucket per calendar day of the interval, zero-filled."""
    orders_by_day: Dict[date, List[Order]] = defaultdict(list)
    for order in filter_orders(orders, scope):
        orders_by_day[order.created_at.date()].append(order)

    entries_by_day: Dict[date, List[ExternalSalesEntry]] = defaultdict(list)
    for entry in filter_entries(entries, scope):
        entries_by_day[entry.date].append(entry)

    buckets = []
    for day in scope.interval.days():
        day_orders = orders_by_day.get(day, [])
        revenue = _source_revenue(day_orders, entries_by_day.get(day, []))
        buckets.append(DailyBucket(
            date=day,
            pos=revenue.pos,
            ecommerce=revenue.ecommerce,
            uber_eats=revenue.uber_eats,
            doordash=revenue.doordash,
            total=revenue.total,
            order_count=sum(1 for o in day_orders if not _is_cancelled(o)),
        ))
    return buckets


def compute_branch_comparison(
    interval: DateInterval,
    branches: Sequence[Branch],
    orders: Iterable[Order],
    entries: Iterable[ExternalSalesEntry],
) -> List[BranchRollup]:
    """Rank branches by revenue, descending. Equal revenue keeps branch list order."""
    everywhere = SalesScope(branch_id=None, interval=interval)

    orders_by_branch: Dict[str, List[Order]] = defaultdict(list)
    for order in filter_orders(orders, everywhere):
        orders_by_branch[order.branch_id].append(order)

    entries_by_branch: Dict[str, List[ExternalSalesEntry]] = defaultdict(list)
    for entry in filter_entries(entries, everywhere):
        entries_by_branch[entry.branch_id].append(entry)

    rollups = []
    for branch in branches:
        summary = _summarise(orders_by_branch.get(branch.id, []), entries_by_branch.get(branch.id, []))
        rollups.append(BranchRollup(
            branch_id=branch.id,
            branch_name=branch.short_name,
            total_revenue=summary.total_revenue,
            order_count=summary.order_count,
            avg_order_value=summary.avg_order_value,
        ))

    # sorted() is stable, including with reverse=True
    return sorted(rollups, key=lambda r: r.total_revenue, reverse=True)


def compute_top_products(scope: SalesScope, orders: Iterable[Order], limit: int) -> List[ProductRollup]:
    """Best sellers by line-item revenue; ties go to the product seen first."""
    if limit <= 0:
        return []

    product_agg: Dict[str, dict] = {}
    for order in filter_orders(orders, scope):
        if _is_cancelled(order):
            continue
        for item in order.items:
            agg = product_agg.setdefault(
                item.product_id, {"name": item.product_name, "revenue": 0.0, "units": 0}
            )
            agg["revenue"] += item.total_price
            agg["units"] += item.quantity

    ranked = sorted(product_agg.items(), key=lambda kv: kv[1]["revenue"], reverse=True)
    return [
        ProductRollup(product_id=pid, product_name=d["name"], revenue=d["revenue"], units_sold=d["units"])
        for pid, d in ranked[:limit]
    ]


def compute_platform_stats(
    scope: SalesScope,
    orders: Iterable[Order],
    entries: Iterable[ExternalSalesEntry],
) -> List[PlatformStats]:
    """Tracked vs imported figures per delivery platform."""
    scoped_orders = [o for o in filter_orders(orders, scope) if not _is_cancelled(o)]
    scoped_entries = filter_entries(entries, scope)

    stats = []
    for platform in PLATFORM_KEYS:
        platform_orders = [o for o in scoped_orders if _value(o.source) == platform]
        platform_entries = [e for e in scoped_entries if _value(e.platform) == platform]
        stats.append(PlatformStats(
            platform=platform,
            order_total=sum(o.total for o in platform_orders),
            order_count=len(platform_orders),
            imported_total=sum(e.total_sales for e in platform_entries),
            imported_count=sum(e.order_count for e in platform_entries),
        ))
    return stats
