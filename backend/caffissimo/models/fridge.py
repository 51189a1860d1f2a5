"""
Fridge Stock Report - daily fridge temperature log per branch.
"""
from datetime import date
from typing import List, Optional

from pydantic import BaseModel

from caffissimo.models.common import UtcDateTime


class FridgeTemperatureEntry(BaseModel):
    name: str
    temperature: float  # °F

    class Config:
        frozen = True


class FridgeStockReport(BaseModel):
    id: str
    branch_id: str
    date: date
    temperatures: List[FridgeTemperatureEntry]
    notes: Optional[str] = None
    submitted_by: str
    created_at: UtcDateTime

    class Config:
        frozen = True
