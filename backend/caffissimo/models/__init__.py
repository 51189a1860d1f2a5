"""
Models package - immutable value records for every entity the admin core reads.
"""
from caffissimo.models.user import Role, User
from caffissimo.models.branch import Branch, DayHours
from caffissimo.models.catalog import Category, Product, BranchProduct
from caffissimo.models.order import (
    Order,
    OrderItem,
    OrderSource,
    OrderStatus,
    PaymentMethod,
    StatusHistoryEntry,
    DELIVERY_SOURCES,
)
from caffissimo.models.external_sales import ExternalSalesEntry, Platform, EntrySource
from caffissimo.models.offer import Offer, DiscountType
from caffissimo.models.fridge import FridgeStockReport, FridgeTemperatureEntry
from caffissimo.models.attendance import (
    AttendanceEntry,
    AttendanceStatus,
    PosDayRecord,
    PosSession,
    PosSessionView,
)
from caffissimo.models.audit_log import AuditLog, AuditAction, ACTION_LABELS
from caffissimo.models.settings import StoreSettings

__all__ = [
    "Role",
    "User",
    "Branch",
    "DayHours",
    "Category",
    "Product",
    "BranchProduct",
    "Order",
    "OrderItem",
    "OrderSource",
    "OrderStatus",
    "PaymentMethod",
    "StatusHistoryEntry",
    "DELIVERY_SOURCES",
    "ExternalSalesEntry",
    "Platform",
    "EntrySource",
    "Offer",
    "DiscountType",
    "FridgeStockReport",
    "FridgeTemperatureEntry",
    "AttendanceEntry",
    "AttendanceStatus",
    "PosSession",
    "PosSessionView",
    "PosDayRecord",
    "AuditLog",
    "AuditAction",
    "ACTION_LABELS",
    "StoreSettings",
]
