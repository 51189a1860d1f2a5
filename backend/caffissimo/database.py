"""
In-memory data store.

Stands in for a relational store behind the admin core. Collections are held
as tuples and swapped whole on every write, so each list_* call returns a
consistent snapshot even while another request is writing.
"""
import logging
import threading
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Tuple

from caffissimo.models import (
    AttendanceEntry,
    AuditLog,
    Branch,
    BranchProduct,
    Category,
    ExternalSalesEntry,
    FridgeStockReport,
    Offer,
    Order,
    PosSession,
    Product,
    StoreSettings,
    User,
)
from caffissimo.schemas.scope import DateInterval
from caffissimo.seed import SeedData, generate_seed_data

logger = logging.getLogger(__name__)


def _in_branch(record, branch_id: Optional[str]) -> bool:
    return branch_id is None or record.branch_id == branch_id


class DataStore:

    def __init__(self, data: SeedData):
        self._lock = threading.Lock()
        self._branches: Tuple[Branch, ...] = tuple(data.branches)
        self._categories: Tuple[Category, ...] = tuple(data.categories)
        self._products: Tuple[Product, ...] = tuple(data.products)
        self._branch_products: Tuple[BranchProduct, ...] = tuple(data.branch_products)
        self._users: Tuple[User, ...] = tuple(data.users)
        self._orders: Tuple[Order, ...] = tuple(data.orders)
        self._external_sales: Tuple[ExternalSalesEntry, ...] = tuple(data.external_sales)
        self._offers: Tuple[Offer, ...] = tuple(data.offers)
        self._fridge_reports: Tuple[FridgeStockReport, ...] = tuple(data.fridge_reports)
        self._attendance: Tuple[AttendanceEntry, ...] = tuple(data.attendance)
        self._pos_sessions: Tuple[PosSession, ...] = tuple(data.pos_sessions)
        self._audit_logs: Tuple[AuditLog, ...] = tuple(data.audit_logs)
        self._settings: Optional[StoreSettings] = data.store_settings
        self._id_counters: Dict[str, int] = {}

    # ── Reference data ─────────────────────────────

    def list_branches(self) -> List[Branch]:
        return list(self._branches)

    def get_branch(self, branch_id: str) -> Optional[Branch]:
        return next((b for b in self._branches if b.id == branch_id), None)

    def list_categories(self) -> List[Category]:
        return sorted(self._categories, key=lambda c: c.sort_order)

    def list_products(self, category_id: Optional[str] = None) -> List[Product]:
        return [p for p in self._products if category_id is None or p.category_id == category_id]

    def get_product(self, product_id: str) -> Optional[Product]:
        return next((p for p in self._products if p.id == product_id), None)

    def list_branch_products(self, branch_id: Optional[str] = None) -> List[BranchProduct]:
        return [bp for bp in self._branch_products if _in_branch(bp, branch_id)]

    def list_users(self, branch_id: Optional[str] = None, role: Optional[str] = None) -> List[User]:
        return [
            u for u in self._users
            if (branch_id is None or u.branch_id == branch_id)
            and (role is None or u.role.value == role)
        ]

    def get_settings(self) -> Optional[StoreSettings]:
        return self._settings

    # ── Sales ──────────────────────────────────────

    def list_orders(
        self,
        branch_id: Optional[str] = None,
        interval: Optional[DateInterval] = None,
        source: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Order]:
        return [
            o for o in self._orders
            if _in_branch(o, branch_id)
            and (interval is None or interval.contains(o.created_at))
            and (source is None or o.source.value == source)
            and (status is None or o.status.value == status)
        ]

    def get_order(self, order_id: str) -> Optional[Order]:
        return next((o for o in self._orders if o.id == order_id), None)

    def list_external_sales_entries(
        self,
        branch_id: Optional[str] = None,
        interval: Optional[DateInterval] = None,
        platform: Optional[str] = None,
    ) -> List[ExternalSalesEntry]:
        return [
            e for e in self._external_sales
            if _in_branch(e, branch_id)
            and (interval is None or interval.contains_day(e.date))
            and (platform is None or e.platform.value == platform)
        ]

    # ── Operations ─────────────────────────────────

    def list_offers(self) -> List[Offer]:
        return list(self._offers)

    def list_fridge_reports(
        self, branch_id: Optional[str] = None, interval: Optional[DateInterval] = None
    ) -> List[FridgeStockReport]:
        return [
            r for r in self._fridge_reports
            if _in_branch(r, branch_id) and (interval is None or interval.contains_day(r.date))
        ]

    def list_attendance(
        self, branch_id: Optional[str] = None, interval: Optional[DateInterval] = None
    ) -> List[AttendanceEntry]:
        return [
            a for a in self._attendance
            if _in_branch(a, branch_id) and (interval is None or interval.contains_day(a.date))
        ]

    def list_pos_sessions(
        self, branch_id: Optional[str] = None, interval: Optional[DateInterval] = None
    ) -> List[PosSession]:
        return [
            s for s in self._pos_sessions
            if _in_branch(s, branch_id) and (interval is None or interval.contains_day(s.login_at.date()))
        ]

    def list_audit_logs(
        self, branch_id: Optional[str] = None, interval: Optional[DateInterval] = None
    ) -> List[AuditLog]:
        return [
            log for log in self._audit_logs
            if _in_branch(log, branch_id) and (interval is None or interval.contains(log.created_at))
        ]

    # ── Writes (whole-record replacement / append) ──

    def replace_order(self, order: Order) -> Order:
        with self._lock:
            if not any(o.id == order.id for o in self._orders):
                raise LookupError(f"Order {order.id} not found")
            self._orders = tuple(order if o.id == order.id else o for o in self._orders)
        return order

    def add_external_sales_entries(self, entries: Iterable[ExternalSalesEntry]) -> List[ExternalSalesEntry]:
        entries = list(entries)
        with self._lock:
            self._external_sales = self._external_sales + tuple(entries)
        return entries

    def add_fridge_report(self, report: FridgeStockReport) -> FridgeStockReport:
        with self._lock:
            self._fridge_reports = (report,) + self._fridge_reports
        return report

    def append_audit_log(self, log: AuditLog) -> AuditLog:
        with self._lock:
            self._audit_logs = (log,) + self._audit_logs
        return log

    def replace_settings(self, store_settings: StoreSettings) -> StoreSettings:
        with self._lock:
            self._settings = store_settings
        return store_settings

    def next_id(self, prefix: str) -> str:
        """Sequential id for a new record of the given kind."""
        with self._lock:
            current = self._id_counters.get(prefix)
            if current is None:
                existing = {
                    "ext": self._external_sales,
                    "fridge": self._fridge_reports,
                    "log": self._audit_logs,
                }
                current = len(existing.get(prefix, ()))
            current += 1
            self._id_counters[prefix] = current
            return f"{prefix}-{current}"


@lru_cache()
def get_store() -> DataStore:
    """Get the process-wide seeded store (FastAPI dependency)."""
    logger.info("Seeding in-memory data store")
    return DataStore(generate_seed_data())
