"""
Offer Model - discount rules with an optional product/category/branch scope.
Status is derived at read time (see services.offer_service).
"""
from typing import List, Optional
import enum

from pydantic import BaseModel, Field

from caffissimo.models.common import UtcDateTime


class DiscountType(str, enum.Enum):
    PERCENT = "percent"
    FIXED = "fixed"


class Offer(BaseModel):
    id: str
    name: str
    description: str = ""
    discount_type: DiscountType
    discount_value: float = Field(..., ge=0)
    start_date: UtcDateTime
    end_date: UtcDateTime
    product_ids: Optional[List[str]] = None
    category_ids: Optional[List[str]] = None
    branch_ids: Optional[List[str]] = None  # None or empty -> every branch
    is_active: bool = True
    created_at: UtcDateTime
    updated_at: UtcDateTime

    class Config:
        frozen = True
