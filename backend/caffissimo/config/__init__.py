"""
Application Configuration
"""
from pydantic_settings import BaseSettings
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "Caffissimo Admin Platform"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS / hosts
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]
    ALLOWED_HOSTS: List[str] = ["*"]

    # Seed data (deterministic in-process data set)
    SEED_BASE_DATE: str = "2026-02-05T12:00:00"
    SEED_RANDOM_SEED: int = 12345
    SEED_ORDER_COUNT: int = 120

    # Pricing
    TAX_RATE: float = 0.0875
    SERVICE_FEE_RATE: float = 0.0
    MONEY_TOLERANCE: float = 0.01  # allowed drift between stored and recomputed totals

    # Reporting
    DEFAULT_DATE_PRESET: str = "7d"  # today, 7d, 30d
    TOP_PRODUCTS_LIMIT: int = 5

    # POS sessions
    POS_IDLE_TIMEOUT_MINUTES: int = 10

    # Fridge compliance (°F)
    FRIDGE_MAX_TEMPERATURE: float = 41.0

    # Pagination
    DEFAULT_PAGE_SIZE: int = 50
    MAX_PAGE_SIZE: int = 500

    # Rate Limiting
    RATE_LIMIT_PER_MINUTE: int = 100

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
