"""
Branch Model - a single coffee-shop location.
"""
from typing import Dict, Optional

from pydantic import BaseModel, EmailStr

from caffissimo.models.common import UtcDateTime


class DayHours(BaseModel):
    open: str
    close: str
    closed: bool = False

    class Config:
        frozen = True


class Branch(BaseModel):
    id: str
    name: str
    address: str
    phone: str
    email: EmailStr
    is_open: bool = True
    opening_hours: Dict[str, DayHours] = {}  # keyed by lowercase weekday name
    uber_eats_url: Optional[str] = None
    door_dash_url: Optional[str] = None
    created_at: UtcDateTime
    updated_at: UtcDateTime

    class Config:
        frozen = True

    @property
    def short_name(self) -> str:
        return self.name.replace("Caffissimo", "").strip()
