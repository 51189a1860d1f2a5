"""
Audit Log - immutable append-only record of admin actions.
"""
from typing import Any, Dict, Optional
import enum

from pydantic import BaseModel

from caffissimo.models.common import UtcDateTime


class AuditAction(str, enum.Enum):
    PRICE_CHANGE = "price_change"
    OFFER_CHANGE = "offer_change"
    ORDER_CANCELLED = "order_cancelled"
    USER_CREATED = "user_created"
    USER_UPDATED = "user_updated"
    BRANCH_UPDATED = "branch_updated"
    PRODUCT_CREATED = "product_created"
    PRODUCT_UPDATED = "product_updated"
    STOCK_REPORT = "stock_report"
    ATTENDANCE_UPDATED = "attendance_updated"
    SETTINGS_UPDATED = "settings_updated"


ACTION_LABELS = {
    AuditAction.PRICE_CHANGE: "Price Change",
    AuditAction.OFFER_CHANGE: "Offer Change",
    AuditAction.ORDER_CANCELLED: "Order Cancelled",
    AuditAction.USER_CREATED: "User Created",
    AuditAction.USER_UPDATED: "User Updated",
    AuditAction.BRANCH_UPDATED: "Branch Updated",
    AuditAction.PRODUCT_CREATED: "Product Created",
    AuditAction.PRODUCT_UPDATED: "Product Updated",
    AuditAction.STOCK_REPORT: "Stock Report",
    AuditAction.ATTENDANCE_UPDATED: "Attendance Updated",
    AuditAction.SETTINGS_UPDATED: "Settings Updated",
}


class AuditLog(BaseModel):
    id: str
    action: AuditAction
    entity_type: str
    entity_id: str
    user_id: str
    user_name: str
    branch_id: Optional[str] = None
    details: Dict[str, Any] = {}
    created_at: UtcDateTime

    class Config:
        frozen = True
