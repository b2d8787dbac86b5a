"""Configuration models: pricing inputs and engine settings."""

from talent_pricing.config.config_item import (
    PricingConfigItem,
    ServiceFeeBase,
    TaxCalculationBase,
    generate_config_id,
)
from talent_pricing.config.strategy import (
    CLEARED,
    NOT_CONFIGURED,
    PRICING_MODELS,
    Cleared,
    Configured,
    NotConfigured,
    PlatformPricingStrategy,
    PlatformSlot,
    PricingModel,
    TalentProcurementStrategy,
)
from talent_pricing.config.settings import PricingSettings, get_settings

__all__ = [
    "PricingConfigItem",
    "ServiceFeeBase",
    "TaxCalculationBase",
    "generate_config_id",
    "PlatformPricingStrategy",
    "PricingModel",
    "PRICING_MODELS",
    "PlatformSlot",
    "NotConfigured",
    "Configured",
    "Cleared",
    "NOT_CONFIGURED",
    "CLEARED",
    "TalentProcurementStrategy",
    "PricingSettings",
    "get_settings",
]
