"""
Report Schemas - sales rollups returned to the dashboard and reports pages
"""
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel


class SourceBreakdown(BaseModel):
    """Revenue per order source. Delivery platforms include external entries."""
    pos: float = 0.0
    ecommerce: float = 0.0
    uber_eats: float = 0.0
    doordash: float = 0.0

    @property
    def total(self) -> float:
        return self.pos + self.ecommerce + self.uber_eats + self.doordash


class SalesSummary(BaseModel):
    """Headline figures for a scope"""
    total_revenue: float
    by_source: SourceBreakdown
    order_count: int  # non-cancelled orders only
    cancelled_count: int
    avg_order_value: float


class DailyBucket(BaseModel):
    date: date
    pos: float = 0.0
    ecommerce: float = 0.0
    uber_eats: float = 0.0
    doordash: float = 0.0
    total: float = 0.0
    order_count: int = 0


class BranchRollup(BaseModel):
    branch_id: str
    branch_name: str
    total_revenue: float
    order_count: int
    avg_order_value: float


class ProductRollup(BaseModel):
    product_id: str
    product_name: str
    revenue: float
    units_sold: int


class PlatformStats(BaseModel):
    """Tracked orders vs imported aggregates for one delivery platform"""
    platform: str
    order_total: float
    order_count: int
    imported_total: float
    imported_count: int  # as reported by the platform, not reconciled


class DailyReport(BaseModel):
    branch_id: Optional[str] = None
    summary: SalesSummary
    daily: List[DailyBucket]


class ActivityItem(BaseModel):
    """One row of the dashboard's recent-activity feed"""
    id: str
    type: str  # order | log
    title: str
    subtitle: str
    source: Optional[str] = None
    status: Optional[str] = None
    timestamp: datetime
