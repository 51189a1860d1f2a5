"""
Catalog Schemas - products as seen from one branch
"""
from typing import List, Optional

from pydantic import BaseModel


class ProductListItem(BaseModel):
    id: str
    name: str
    description: str
    category_id: str
    category_name: Optional[str] = None
    tags: List[str] = []
    price: Optional[float] = None  # None when no branch is in scope
    is_available: bool = True
    is_visible: bool = True
