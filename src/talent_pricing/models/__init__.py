"""Result models: engine output contracts."""

from talent_pricing.models.results import (
    ChangeType,
    CoefficientBreakdown,
    ConfigStatus,
    ConfigStatusInfo,
    OverlapCheck,
    PricingChange,
    PricingModeInfo,
    ProjectQuoteSnapshot,
    ValidationReport,
)

__all__ = [
    "ChangeType",
    "CoefficientBreakdown",
    "ConfigStatus",
    "ConfigStatusInfo",
    "OverlapCheck",
    "PricingChange",
    "PricingModeInfo",
    "ProjectQuoteSnapshot",
    "ValidationReport",
]
