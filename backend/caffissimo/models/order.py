"""
Order Model - individually tracked transactions from every sales channel.
"""
from typing import List, Optional
import enum

from pydantic import BaseModel, Field, model_validator

from caffissimo.config import settings
from caffissimo.models.common import UtcDateTime


class OrderSource(str, enum.Enum):
    POS = "pos"
    ECOMMERCE = "ecommerce"
    UBER_EATS = "uber_eats"
    DOORDASH = "doordash"


class OrderStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY = "ready"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentMethod(str, enum.Enum):
    CASH = "cash"
    CARD = "card"
    ONLINE = "online"
    EXTERNAL = "external"


DELIVERY_SOURCES = (OrderSource.UBER_EATS, OrderSource.DOORDASH)


class OrderItem(BaseModel):
    id: str
    product_id: str
    product_name: str
    quantity: int = Field(..., ge=1)
    unit_price: float = Field(..., ge=0, allow_inf_nan=False)
    total_price: float = Field(..., ge=0, allow_inf_nan=False)

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_line_total(self):
        expected = self.quantity * self.unit_price
        if abs(self.total_price - expected) > settings.MONEY_TOLERANCE:
            raise ValueError(
                f"item {self.id}: total_price {self.total_price} != quantity x unit_price ({expected:.2f})"
            )
        return self


class StatusHistoryEntry(BaseModel):
    status: OrderStatus
    timestamp: UtcDateTime
    note: Optional[str] = None

    class Config:
        frozen = True


class Order(BaseModel):
    id: str
    order_number: str
    branch_id: str
    source: OrderSource
    status: OrderStatus
    items: List[OrderItem]
    subtotal: float = Field(..., allow_inf_nan=False)
    tax: float = Field(0.0, allow_inf_nan=False)
    discount: float = Field(0.0, allow_inf_nan=False)
    total: float = Field(..., allow_inf_nan=False)
    payment_method: PaymentMethod
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    notes: Optional[str] = None
    internal_notes: Optional[str] = None
    external_order_id: Optional[str] = None
    is_read_only: bool = False
    status_history: List[StatusHistoryEntry] = []  # append-only
    created_at: UtcDateTime
    updated_at: UtcDateTime

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_total(self):
        expected = self.subtotal + self.tax - self.discount
        if abs(self.total - expected) > settings.MONEY_TOLERANCE:
            raise ValueError(
                f"order {self.id}: total {self.total} != subtotal + tax - discount ({expected:.2f})"
            )
        return self

    @property
    def is_cancelled(self) -> bool:
        return self.status == OrderStatus.CANCELLED

    def __repr__(self):
        return f"<Order {self.order_number} ({self.status.value})>"
