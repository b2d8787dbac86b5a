"""Project quotes: freezing the client's coefficients into a new project.

A project keeps the coefficients and pricing modes that were in force when
it was created.  The snapshot is a value copy; editing the client's
strategy afterwards does not change it.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Mapping

from talent_pricing.config.settings import PricingSettings
from talent_pricing.config.strategy import TalentProcurementStrategy
from talent_pricing.engine.aggregator import compute_all_coefficients
from talent_pricing.engine.resolver import to_reference_date
from talent_pricing.models.results import ProjectQuoteSnapshot

logger = logging.getLogger(__name__)


def freeze_project_quote(
    strategy: TalentProcurementStrategy,
    as_of: date | datetime | None = None,
    platform_fee_rates: Mapping[str, float] | None = None,
    settings: PricingSettings | None = None,
) -> ProjectQuoteSnapshot:
    """Snapshot the coefficients and pricing modes in force on ``as_of``."""
    day = to_reference_date(as_of)
    live = strategy.configured_strategies()
    coefficients = compute_all_coefficients(live, day, platform_fee_rates, settings)
    models = {platform: s.pricing_model for platform, s in live.items() if s.enabled}

    logger.info("Froze project quote on %s for platforms %s", day, sorted(models))
    return ProjectQuoteSnapshot(
        quotation_coefficients=coefficients,
        pricing_models=models,
        as_of=day,
        frozen_at=datetime.now(timezone.utc),
    )


def quote_price(snapshot: ProjectQuoteSnapshot, platform: str, list_price: float) -> int | None:
    """Price quoted to the client for a creator's list price.

    None when the platform is not priced through a coefficient: it was not
    enabled when the quote was frozen, or it is in ``project`` mode where
    prices are negotiated by hand.  Otherwise ``round(list_price × coefficient)``
    with a coefficient of 1.0 when no configuration was in force.
    """
    model = snapshot.pricing_models.get(platform)
    if model is None or model == "project":
        return None
    coefficient = snapshot.quotation_coefficients.get(platform, 1.0)
    return round(list_price * coefficient)
