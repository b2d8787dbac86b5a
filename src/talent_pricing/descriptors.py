"""Static display metadata for pricing modes and configuration statuses."""

from __future__ import annotations

from talent_pricing.models.results import ConfigStatus, ConfigStatusInfo, PricingModeInfo

PRICING_MODE_INFO: dict[str, PricingModeInfo] = {
    "framework": PricingModeInfo(
        label="Framework discount",
        color_tag="blue",
        explanation="Projects automatically use the quotation coefficient below to price client quotes.",
        coefficient_label="Quotation coefficient",
        status_text="Available to projects",
    ),
    "project": PricingModeInfo(
        label="Per-project pricing",
        color_tag="default",
        explanation="Each project enters its client quote by hand; no discount strategy is needed.",
        coefficient_label="Reference coefficient",
        status_text="Priced individually",
    ),
    "hybrid": PricingModeInfo(
        label="Hybrid",
        color_tag="orange",
        explanation="Within a project each creator can use the coefficient or a hand-entered quote.",
        coefficient_label="Base coefficient",
        status_text="Optional",
    ),
}

CONFIG_STATUS_INFO: dict[str, ConfigStatusInfo] = {
    "active": ConfigStatusInfo(label="In force", color_tag="green"),
    "upcoming": ConfigStatusInfo(label="Upcoming", color_tag="blue"),
    "expired": ConfigStatusInfo(label="Expired", color_tag="default"),
    "permanent": ConfigStatusInfo(label="Permanent", color_tag="green"),
}


def describe_pricing_mode(mode: str) -> PricingModeInfo:
    """Display metadata for ``mode``; raises KeyError for an unknown mode."""
    try:
        return PRICING_MODE_INFO[mode]
    except KeyError:
        raise KeyError(f"Unknown pricing mode '{mode}'") from None


def describe_config_status(status: ConfigStatus) -> ConfigStatusInfo:
    """Label and tag colour for a configuration status; raises KeyError for an unknown status."""
    try:
        return CONFIG_STATUS_INFO[status]
    except KeyError:
        raise KeyError(f"Unknown configuration status '{status}'") from None
