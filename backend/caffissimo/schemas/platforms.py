"""
External Platform Schemas
"""
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from caffissimo.models import ExternalSalesEntry, Platform
from caffissimo.schemas.reports import PlatformStats


class ExternalSalesCreate(BaseModel):
    platform: Platform
    date: date
    total_sales: float = Field(..., ge=0, allow_inf_nan=False)
    order_count: int = Field(0, ge=0)
    branch_id: Optional[str] = None  # ignored for branch-pinned roles


class ExternalSalesImportRequest(BaseModel):
    platform: Platform
    csv_text: str = Field(..., description="CSV with header date,total_sales,order_count")
    branch_id: Optional[str] = None


class ExternalSalesImportResult(BaseModel):
    imported: int
    skipped: int
    entries: List[ExternalSalesEntry]


class ExternalSalesListResponse(BaseModel):
    entries: List[ExternalSalesEntry]
    total: int
    stats: List[PlatformStats]
