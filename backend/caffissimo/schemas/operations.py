"""
Operations Schemas - offers, fridge reports, POS records, settings
"""
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from caffissimo.models import FridgeStockReport, FridgeTemperatureEntry, Offer


class OfferResponse(BaseModel):
    offer: Offer
    status: str  # inactive | scheduled | expired | active
    applies_to: str
    branches: str


class FridgeReportCreate(BaseModel):
    date: date
    temperatures: List[FridgeTemperatureEntry] = Field(..., min_length=1)
    notes: Optional[str] = None
    branch_id: Optional[str] = None  # ignored for branch-pinned roles


class FridgeReportResponse(BaseModel):
    report: FridgeStockReport
    compliant: bool
    out_of_range: List[FridgeTemperatureEntry]


class SettingsUpdate(BaseModel):
    tax_rate: Optional[float] = Field(None, ge=0, le=1)
    service_fee_rate: Optional[float] = Field(None, ge=0, le=1)
