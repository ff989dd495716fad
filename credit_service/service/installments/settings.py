"""
Installment Settings for the Credit Service.

Environment variables use the CREDIT_ prefix:
    CREDIT_CURRENCY_PLACES=2
    CREDIT_ROUNDING=ROUND_HALF_UP
"""

import decimal
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CreditSettings(BaseSettings):
    """Configurable parameters for installment arithmetic."""

    model_config = SettingsConfigDict(
        env_prefix="CREDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    currency_places: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Decimal places kept on installment values",
    )
    rounding: str = Field(
        default=decimal.ROUND_HALF_UP,
        description="decimal module rounding mode applied to installment values",
    )

    @field_validator("rounding")
    @classmethod
    def validate_rounding(cls, v: str) -> str:
        """Ensure the rounding mode is one the decimal module knows."""
        mode = v.upper()
        if not mode.startswith("ROUND_") or not hasattr(decimal, mode):
            raise ValueError(f"Unknown rounding mode: {v}")
        return mode

    @property
    def quantum(self) -> decimal.Decimal:
        """Smallest representable currency unit, e.g. Decimal('0.01')."""
        return decimal.Decimal(1).scaleb(-self.currency_places)


@lru_cache
def get_credit_settings() -> CreditSettings:
    """Get cached credit settings instance."""
    return CreditSettings()


credit_settings = get_credit_settings()
