"""Engine settings: constants of the coefficient formula.

Loaded from environment variables prefixed ``TALENT_PRICING_`` (or a local
``.env``).  The defaults are the production values; override only for
what-if recomputation.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PricingSettings(BaseSettings):
    """Numeric constants used by the calculator and the validator."""

    model_config = SettingsConfigDict(
        env_prefix="TALENT_PRICING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    reference_base_amount: float = Field(
        default=1000.0, gt=0,
        description="Normalized list price the formula is evaluated on. "
                    "Cancels out of the final ratio; kept for readable breakdowns.",
    )
    tax_rate: float = Field(
        default=0.06, ge=0, le=1.0,
        description="Tax added on top when a quote is not tax-inclusive.",
    )
    coefficient_decimals: int = Field(
        default=4, ge=0, le=10,
        description="Decimal places the coefficient is rounded to.",
    )
    coefficient_upper_bound: float = Field(
        default=10.0, gt=0,
        description="Exclusive upper bound for a persistable coefficient. "
                    "The lower bound is always an exclusive 0.",
    )
    log_level: str = Field(default="INFO", description="Level used by setup_logging()")


@lru_cache()
def get_settings() -> PricingSettings:
    """Cached settings instance."""
    return PricingSettings()
