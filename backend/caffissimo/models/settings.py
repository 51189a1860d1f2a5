"""Store-wide pricing settings."""
from pydantic import BaseModel, Field

from caffissimo.models.common import UtcDateTime


class StoreSettings(BaseModel):
    id: str = "settings-1"
    tax_rate: float = Field(..., ge=0, le=1)
    service_fee_rate: float = Field(0.0, ge=0, le=1)
    updated_at: UtcDateTime

    class Config:
        frozen = True
