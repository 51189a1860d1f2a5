"""
Order Schemas
"""
from typing import List, Optional

from pydantic import BaseModel

from caffissimo.models import Order, OrderStatus


class OrderListResponse(BaseModel):
    orders: List[Order]
    total: int
    page: int
    page_size: int


class OrderStatusUpdate(BaseModel):
    status: OrderStatus
    note: Optional[str] = None


class OrderCancelRequest(BaseModel):
    reason: Optional[str] = None
