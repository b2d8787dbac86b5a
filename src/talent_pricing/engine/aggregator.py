"""Cross-platform aggregation: per-platform coefficient map for a client."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Mapping

from talent_pricing.config.settings import PricingSettings
from talent_pricing.config.strategy import PlatformPricingStrategy, TalentProcurementStrategy
from talent_pricing.engine.coefficient import compute_coefficient
from talent_pricing.engine.resolver import resolve_effective_config, to_reference_date
from talent_pricing.exceptions import MalformedStrategyError

logger = logging.getLogger(__name__)


def compute_all_coefficients(
    strategies: Mapping[str, PlatformPricingStrategy],
    as_of: date | datetime | None = None,
    platform_fee_rates: Mapping[str, float] | None = None,
    settings: PricingSettings | None = None,
) -> dict[str, float]:
    """Coefficient for every platform that has one on ``as_of``.

    Disabled platforms, ``project`` mode and platforms with no configuration
    in force are left out; absence means "not applicable".
    ``platform_fee_rates`` overrides the fee rate stored on the items.
    """
    day = to_reference_date(as_of)
    overrides = platform_fee_rates or {}
    coefficients: dict[str, float] = {}

    for platform, strategy in strategies.items():
        if not isinstance(strategy, PlatformPricingStrategy):
            raise MalformedStrategyError(
                f"expected PlatformPricingStrategy, got {type(strategy).__name__}", platform,
            )
        if strategy.pricing_model == "project" and strategy.configs is not None:
            raise MalformedStrategyError("project pricing mode carries a configuration list", platform)

        if not strategy.enabled:
            continue
        if not strategy.uses_coefficient:
            continue

        effective = resolve_effective_config(strategy.configs, day)
        if effective is None:
            logger.debug("%s: no effective pricing on %s", platform, day)
            continue

        coefficients[platform] = compute_coefficient(effective, overrides.get(platform), settings)

    return coefficients


def build_coefficient_snapshot(
    strategy: TalentProcurementStrategy,
    as_of: date | datetime | None = None,
    platform_fee_rates: Mapping[str, float] | None = None,
    settings: PricingSettings | None = None,
) -> dict[str, float | None]:
    """Coefficient map in persisted form.

    Same as :func:`compute_all_coefficients` over the configured platforms,
    plus an explicit ``None`` for every cleared platform.
    """
    snapshot: dict[str, float | None] = dict(
        compute_all_coefficients(strategy.configured_strategies(), as_of, platform_fee_rates, settings)
    )
    for platform in strategy.cleared_platforms():
        snapshot[platform] = None
    return snapshot


def refresh_coefficients(
    strategy: TalentProcurementStrategy,
    as_of: date | datetime | None = None,
    platform_fee_rates: Mapping[str, float] | None = None,
    settings: PricingSettings | None = None,
) -> TalentProcurementStrategy:
    """Return ``strategy`` with its coefficient snapshot recomputed."""
    snapshot = build_coefficient_snapshot(strategy, as_of, platform_fee_rates, settings)
    logger.info(
        "Recomputed quotation coefficients for %d platform(s), %d cleared",
        sum(1 for value in snapshot.values() if value is not None),
        sum(1 for value in snapshot.values() if value is None),
    )
    return strategy.with_coefficients(snapshot)
