"""Quotation coefficient: list price → client quote multiplier.

Evaluated on a normalized base amount (1000 by default) so that the
breakdown reads like money; the base cancels out of the final ratio.

  platform_fee = base × platform_fee_rate
  discounted   = (base + platform_fee) × discount      if includes_platform_fee
                 base × discount + platform_fee         otherwise
  service_fee  = (base + platform_fee) × service_rate  if beforeDiscount
                 discounted × service_rate              if afterDiscount
  tax          = 0                                      if includes_tax
                 tax_rate × (discounted + service_fee)  if includeServiceFee
                 tax_rate × discounted                  if excludeServiceFee
  coefficient  = (discounted + service_fee + tax) / base, rounded half-up to 4 places

The calculator never clamps or rejects; bounds are the validator's job.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from talent_pricing.config.config_item import PricingConfigItem
from talent_pricing.config.settings import PricingSettings, get_settings
from talent_pricing.models.results import CoefficientBreakdown


def round_half_up(value: float, decimals: int) -> float:
    """Round on the decimal representation, ties away from zero (1.03125 -> 1.0313)."""
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def compute_breakdown(
    config: PricingConfigItem,
    platform_fee_rate: float | None = None,
    settings: PricingSettings | None = None,
) -> CoefficientBreakdown:
    """Evaluate the formula and keep every intermediate amount.

    ``platform_fee_rate`` overrides ``config.platform_fee_rate`` when given.
    """
    settings = settings or get_settings()
    base = settings.reference_base_amount
    fee_rate = config.platform_fee_rate if platform_fee_rate is None else platform_fee_rate

    # 1. Platform fee
    platform_fee_amount = base * fee_rate

    # 2. Discount
    if config.includes_platform_fee:
        discounted_amount = (base + platform_fee_amount) * config.discount_rate
    else:
        discounted_amount = base * config.discount_rate + platform_fee_amount

    # 3. Service fee
    if config.service_fee_base == "beforeDiscount":
        service_fee_amount = (base + platform_fee_amount) * config.service_fee_rate
    else:
        service_fee_amount = discounted_amount * config.service_fee_rate

    # 4. Tax
    if config.includes_tax:
        tax_amount = 0.0
    elif config.tax_calculation_base == "includeServiceFee":
        tax_amount = (discounted_amount + service_fee_amount) * settings.tax_rate
    else:
        tax_amount = discounted_amount * settings.tax_rate

    # 5-6. Final amount and ratio
    final_amount = discounted_amount + service_fee_amount + tax_amount
    coefficient = round_half_up(final_amount / base, settings.coefficient_decimals)

    return CoefficientBreakdown(
        base_amount=base,
        platform_fee_amount=platform_fee_amount,
        discounted_amount=discounted_amount,
        service_fee_amount=service_fee_amount,
        tax_amount=tax_amount,
        final_amount=final_amount,
        coefficient=coefficient,
    )


def compute_coefficient(
    config: PricingConfigItem,
    platform_fee_rate: float | None = None,
    settings: PricingSettings | None = None,
) -> float:
    """Quotation coefficient for one configuration."""
    return compute_breakdown(config, platform_fee_rate, settings).coefficient


def is_coefficient_in_bounds(coefficient: float, settings: PricingSettings | None = None) -> bool:
    """Persistable iff finite and inside the open interval (0, upper_bound)."""
    settings = settings or get_settings()
    return math.isfinite(coefficient) and 0 < coefficient < settings.coefficient_upper_bound
