"""Pre-save validation of a multi-platform configuration tree.

Checks run per platform in this order and stop at the first failure for
that platform; failures from different platforms accumulate:

  1. enabled framework/hybrid platform has at least one configuration
  2. every rate is within [0, 1]
  3. every non-permanent item has a full window, and valid_from ≤ valid_to
  4. no two dated windows overlap
  5. the effective configuration's coefficient is finite and in (0, 10)

Disabled platforms and ``project`` mode are always valid.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from typing import Mapping, Union

from talent_pricing.config.config_item import PricingConfigItem
from talent_pricing.config.settings import PricingSettings, get_settings
from talent_pricing.config.strategy import Cleared, Configured, NotConfigured, PlatformPricingStrategy
from talent_pricing.engine.coefficient import compute_coefficient, is_coefficient_in_bounds
from talent_pricing.engine.resolver import (
    find_time_overlap,
    format_window,
    resolve_effective_config,
    to_reference_date,
)
from talent_pricing.exceptions import MalformedStrategyError
from talent_pricing.models.results import ValidationReport

logger = logging.getLogger(__name__)

StrategyInput = Union[PlatformPricingStrategy, NotConfigured, Configured, Cleared]

_RATE_FIELDS = (
    ("discount_rate", "discount rate"),
    ("service_fee_rate", "service fee rate"),
    ("platform_fee_rate", "platform fee rate"),
)


def _check_rates(item: PricingConfigItem, name: str) -> str | None:
    for field, label in _RATE_FIELDS:
        value = getattr(item, field)
        if not 0 <= value <= 1:
            return f"{name}: {label} {value:g} must be between 0 and 1"
    return None


def _check_window(item: PricingConfigItem, name: str) -> str | None:
    if item.is_permanent:
        return None
    if item.valid_from is None or item.valid_to is None:
        return f"{name}: a configuration must have a validity window or be marked permanent"
    if item.valid_from > item.valid_to:
        return f"{name}: validity window starts after it ends ({format_window(item)})"
    return None


def validate_platform_strategy(
    strategy: PlatformPricingStrategy,
    name: str,
    as_of: date | datetime | None = None,
    settings: PricingSettings | None = None,
    platform_fee_rate: float | None = None,
) -> str | None:
    """First error for one platform, or None when it can be saved.

    ``platform_fee_rate`` overrides the items' own rate in the bounds check,
    as in :func:`compute_coefficient`.
    """
    if strategy.pricing_model == "project" and strategy.configs is not None:
        raise MalformedStrategyError("project pricing mode carries a configuration list", name)

    if not strategy.enabled or not strategy.uses_coefficient:
        return None

    if not strategy.configs:
        return f"{name}: add at least one pricing configuration"

    for item in strategy.configs:
        error = _check_rates(item, name)
        if error:
            return error

    if platform_fee_rate is not None and not 0 <= platform_fee_rate <= 1:
        return f"{name}: platform fee rate {platform_fee_rate:g} must be between 0 and 1"

    for item in strategy.configs:
        error = _check_window(item, name)
        if error:
            return error

    overlap = find_time_overlap(strategy.configs)
    if overlap:
        first, second = overlap
        return (
            f"{name}: validity windows overlap ({format_window(first)}) "
            f"and ({format_window(second)})"
        )

    effective = resolve_effective_config(strategy.configs, as_of)
    if effective is not None:
        settings = settings or get_settings()
        coefficient = compute_coefficient(effective, platform_fee_rate, settings)
        if not is_coefficient_in_bounds(coefficient, settings):
            logger.warning("%s: coefficient %r out of bounds for config %s", name, coefficient, effective.id)
            shown = f"{coefficient:.4f}" if math.isfinite(coefficient) else str(coefficient)
            return (
                f"{name}: quotation coefficient {shown} must be greater than 0 "
                f"and less than {settings.coefficient_upper_bound:g}"
            )

    return None


def validate_strategies(
    strategies: Mapping[str, StrategyInput],
    as_of: date | datetime | None = None,
    platform_names: Mapping[str, str] | None = None,
    settings: PricingSettings | None = None,
    platform_fee_rates: Mapping[str, float] | None = None,
) -> ValidationReport:
    """Validate every platform and collect human-readable errors.

    Values may be bare strategies or platform slots; ``NotConfigured`` and
    ``Cleared`` slots have nothing to validate.  ``platform_names`` maps
    platform keys to display names used in the messages.
    ``platform_fee_rates`` must be the same overrides later passed to
    :func:`~talent_pricing.engine.aggregator.refresh_coefficients`.
    """
    day = to_reference_date(as_of)
    names = platform_names or {}
    overrides = platform_fee_rates or {}
    errors: list[str] = []

    for platform, value in strategies.items():
        if isinstance(value, (NotConfigured, Cleared)):
            continue
        if isinstance(value, Configured):
            value = value.strategy
        if not isinstance(value, PlatformPricingStrategy):
            raise MalformedStrategyError(
                f"expected PlatformPricingStrategy, got {type(value).__name__}", platform,
            )

        error = validate_platform_strategy(
            value, names.get(platform, platform), day, settings, overrides.get(platform),
        )
        if error:
            errors.append(error)

    if errors:
        logger.debug("Strategy validation failed with %d error(s)", len(errors))
    return ValidationReport.from_errors(errors)
