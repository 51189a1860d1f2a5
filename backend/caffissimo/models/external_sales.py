"""
External Sales Entry - bulk revenue reported by a delivery platform that
did not arrive as individual orders (manual entry or CSV import).
"""
from datetime import date
from typing import Optional
import enum

from pydantic import BaseModel, Field

from caffissimo.models.common import UtcDateTime


class Platform(str, enum.Enum):
    UBER_EATS = "uber_eats"
    DOORDASH = "doordash"


class EntrySource(str, enum.Enum):
    MANUAL = "manual"
    IMPORT = "import"


class ExternalSalesEntry(BaseModel):
    id: str
    branch_id: str
    platform: Platform
    date: date  # day granularity
    total_sales: float = Field(..., ge=0, allow_inf_nan=False)
    order_count: int = Field(0, ge=0)  # as reported, never reconciled against orders
    source: EntrySource
    imported_at: Optional[UtcDateTime] = None
    created_at: UtcDateTime

    class Config:
        frozen = True
