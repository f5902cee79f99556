"""Engine configuration via environment variables.

Provides type-safe settings loading using pydantic-settings.
Environment variables can be loaded from a .env file.

Pricing constants are read once at process start and handed to strategies
through FeeSchedule.from_settings(); business code never reads settings
directly.
"""

from decimal import Decimal
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings loaded from environment variables.

    All settings have sensible defaults for development. Monetary values are
    in VND.

    Environment Variables:
        INNER_CITY_BASE_FEE: Base fee for Hanoi / Ho Chi Minh deliveries
        OTHER_REGION_BASE_FEE: Base fee for every other province
        ADDITIONAL_FEE_PER_INCREMENT: Fee per started weight increment
        RUSH_SURCHARGE_PER_LINE: Flat rush surcharge per eligible order line
        VOLUMETRIC_DIVISOR: cm^3 per kg for dimensional weight
        PAYMENT_GATEWAY: Registered gateway adapter type (default STUB)
        LOG_LEVEL: Logging level (default INFO)
    """

    # Shipping tiers
    INNER_CITY_BASE_FEE: Decimal = Decimal("22000")
    INNER_CITY_BASE_WEIGHT_KG: Decimal = Decimal("3.0")
    OTHER_REGION_BASE_FEE: Decimal = Decimal("30000")
    OTHER_REGION_BASE_WEIGHT_KG: Decimal = Decimal("0.5")
    ADDITIONAL_FEE_PER_INCREMENT: Decimal = Decimal("2500")
    WEIGHT_INCREMENT_KG: Decimal = Decimal("0.5")
    RUSH_SURCHARGE_PER_LINE: Decimal = Decimal("10000")
    VOLUMETRIC_DIVISOR: Decimal = Decimal("6000")

    # Free shipping
    FREE_SHIPPING_THRESHOLD: Decimal = Decimal("100000")
    MAX_FREE_SHIPPING_DISCOUNT: Decimal = Decimal("25000")

    # Pricing validation
    VAT_RATE: Decimal = Decimal("0.10")
    PRICING_TOLERANCE: Decimal = Decimal("0.01")
    HIGH_ORDER_AMOUNT_THRESHOLD: Decimal = Decimal("100000000")
    MAX_ORDER_AGE_DAYS: int = 30

    # Payment gateway
    PAYMENT_GATEWAY: str = "STUB"
    PAYMENT_GATEWAY_TIMEOUT_SECONDS: int = 30
    PAYMENT_GATEWAY_MODE: str = "success"

    # Application
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True
    ENVIRONMENT: str = "development"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache for singleton behavior.
    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
