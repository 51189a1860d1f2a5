"""
Catalog Models - categories, products and per-branch pricing.
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from caffissimo.models.common import UtcDateTime


class Category(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    sort_order: int = 0

    class Config:
        frozen = True


class Product(BaseModel):
    id: str
    name: str
    description: str = ""
    category_id: str
    images: List[str] = []
    tags: List[str] = []
    tasting_notes: Optional[str] = None
    created_at: UtcDateTime
    updated_at: UtcDateTime

    class Config:
        frozen = True


class BranchProduct(BaseModel):
    """Branch-specific price and availability for a product."""
    id: str
    product_id: str
    branch_id: str
    price: float = Field(..., ge=0)
    is_available: bool = True
    is_visible: bool = True
    created_at: UtcDateTime
    updated_at: UtcDateTime

    class Config:
        frozen = True
