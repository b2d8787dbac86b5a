"""Shared test fixtures: sample configurations and strategies."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from talent_pricing.config import (
    PlatformPricingStrategy,
    PricingConfigItem,
    PricingSettings,
    TalentProcurementStrategy,
)


@pytest.fixture
def settings() -> PricingSettings:
    """Production constants, independent of the environment."""
    return PricingSettings(
        reference_base_amount=1000.0,
        tax_rate=0.06,
        coefficient_decimals=4,
        coefficient_upper_bound=10.0,
    )


@pytest.fixture
def worked_example() -> PricingConfigItem:
    """Hand-calculable item: 1000 → 50 fee → 850 discounted → 105 service → 955.

    Coefficient 0.9550.
    """
    return PricingConfigItem(
        id="cfg_worked",
        discount_rate=0.80,
        service_fee_rate=0.10,
        platform_fee_rate=0.05,
        includes_platform_fee=False,
        service_fee_base="beforeDiscount",
        includes_tax=True,
        tax_calculation_base="excludeServiceFee",
        is_permanent=True,
        created_at=datetime(2024, 12, 1, tzinfo=timezone.utc),
        updated_at=datetime(2024, 12, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def january_item() -> PricingConfigItem:
    """Window 2025-01-01 … 2025-01-31, 20.5% off, 5% service fee."""
    return PricingConfigItem(
        id="cfg_jan",
        discount_rate=0.795,
        service_fee_rate=0.05,
        platform_fee_rate=0.05,
        valid_from=date(2025, 1, 1),
        valid_to=date(2025, 1, 31),
        created_at=datetime(2024, 12, 15, 10, 0, tzinfo=timezone.utc),
        updated_at=datetime(2024, 12, 15, 10, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def permanent_item() -> PricingConfigItem:
    """Fallback item with no dates."""
    return PricingConfigItem(
        id="cfg_perm",
        discount_rate=0.90,
        service_fee_rate=0.0,
        platform_fee_rate=0.05,
        is_permanent=True,
        created_at=datetime(2024, 6, 1, tzinfo=timezone.utc),
        updated_at=datetime(2024, 6, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def framework_strategy(january_item: PricingConfigItem, permanent_item: PricingConfigItem) -> PlatformPricingStrategy:
    return PlatformPricingStrategy(
        enabled=True,
        pricing_model="framework",
        configs=[january_item, permanent_item],
    )


@pytest.fixture
def project_strategy() -> PlatformPricingStrategy:
    return PlatformPricingStrategy(enabled=True, pricing_model="project", configs=None)


@pytest.fixture
def client_strategy(
    framework_strategy: PlatformPricingStrategy,
    project_strategy: PlatformPricingStrategy,
    worked_example: PricingConfigItem,
) -> TalentProcurementStrategy:
    """douyin = framework (Jan window + permanent), xiaohongshu = project,
    kuaishou = hybrid with the worked example, bilibili = cleared."""
    return (
        TalentProcurementStrategy()
        .configure("douyin", framework_strategy)
        .configure("xiaohongshu", project_strategy)
        .configure(
            "kuaishou",
            PlatformPricingStrategy(enabled=True, pricing_model="hybrid", configs=[worked_example]),
        )
        .clear("bilibili")
    )
