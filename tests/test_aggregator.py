"""Tests for engine/aggregator.py: per-platform coefficient maps."""

from __future__ import annotations

from datetime import date

import pytest

from talent_pricing.config import PlatformPricingStrategy, PricingConfigItem, TalentProcurementStrategy
from talent_pricing.engine.aggregator import (
    build_coefficient_snapshot,
    compute_all_coefficients,
    refresh_coefficients,
)
from talent_pricing.exceptions import MalformedStrategyError

JAN_15 = date(2025, 1, 15)
FEB_15 = date(2025, 2, 15)


class TestComputeAll:

    def test_effective_config_per_platform(self, framework_strategy, settings):
        coefficients = compute_all_coefficients({"douyin": framework_strategy}, JAN_15, settings=settings)
        # Jan window: 795 + 50 + 52.5 = 897.5
        assert coefficients == {"douyin": pytest.approx(0.8975)}

    def test_falls_back_to_permanent(self, framework_strategy, settings):
        coefficients = compute_all_coefficients({"douyin": framework_strategy}, FEB_15, settings=settings)
        # Permanent: 900 + 50 = 950
        assert coefficients == {"douyin": pytest.approx(0.95)}

    def test_project_mode_never_present(self, framework_strategy, project_strategy, settings):
        coefficients = compute_all_coefficients(
            {"douyin": framework_strategy, "xiaohongshu": project_strategy}, JAN_15, settings=settings,
        )
        assert "xiaohongshu" not in coefficients
        assert "douyin" in coefficients

    def test_disabled_skipped(self, january_item, settings):
        disabled = PlatformPricingStrategy(enabled=False, pricing_model="framework", configs=[january_item])
        assert compute_all_coefficients({"douyin": disabled}, JAN_15, settings=settings) == {}

    def test_resolution_miss_skipped(self, january_item, settings):
        strategy = PlatformPricingStrategy(enabled=True, pricing_model="hybrid", configs=[january_item])
        assert compute_all_coefficients({"kuaishou": strategy}, FEB_15, settings=settings) == {}

    def test_enabled_without_configs_skipped(self, settings):
        strategy = PlatformPricingStrategy(enabled=True, pricing_model="framework", configs=None)
        assert compute_all_coefficients({"douyin": strategy}, JAN_15, settings=settings) == {}

    def test_hybrid_included(self, worked_example, settings):
        strategy = PlatformPricingStrategy(enabled=True, pricing_model="hybrid", configs=[worked_example])
        assert compute_all_coefficients({"kuaishou": strategy}, JAN_15, settings=settings) == {
            "kuaishou": pytest.approx(0.955),
        }

    def test_platform_fee_override(self, worked_example, settings):
        strategy = PlatformPricingStrategy(enabled=True, pricing_model="framework", configs=[worked_example])
        coefficients = compute_all_coefficients(
            {"douyin": strategy, "kuaishou": strategy},
            JAN_15,
            platform_fee_rates={"douyin": 0.10},
            settings=settings,
        )
        assert coefficients["douyin"] == pytest.approx(1.01)
        assert coefficients["kuaishou"] == pytest.approx(0.955)

    def test_project_with_configs_raises(self, january_item):
        bad = PlatformPricingStrategy.model_construct(enabled=True, pricing_model="project", configs=[january_item])
        with pytest.raises(MalformedStrategyError):
            compute_all_coefficients({"xiaohongshu": bad}, JAN_15)

    def test_non_strategy_value_raises(self):
        with pytest.raises(MalformedStrategyError, match="douyin"):
            compute_all_coefficients({"douyin": None}, JAN_15)


class TestSnapshot:

    def test_snapshot_marks_cleared(self, client_strategy, settings):
        snapshot = build_coefficient_snapshot(client_strategy, JAN_15, settings=settings)
        assert snapshot == {
            "douyin": pytest.approx(0.8975),
            "kuaishou": pytest.approx(0.955),
            "bilibili": None,
        }

    def test_never_configured_absent(self, client_strategy, settings):
        snapshot = build_coefficient_snapshot(client_strategy, JAN_15, settings=settings)
        assert "weibo" not in snapshot
        assert "xiaohongshu" not in snapshot

    def test_refresh_stores_snapshot(self, client_strategy, settings):
        refreshed = refresh_coefficients(client_strategy, FEB_15, settings=settings)
        assert refreshed.quotation_coefficients["douyin"] == pytest.approx(0.95)
        assert refreshed.quotation_coefficients["bilibili"] is None
        # input untouched
        assert client_strategy.quotation_coefficients == {}

    def test_refresh_after_clear(self, client_strategy, settings):
        refreshed = refresh_coefficients(client_strategy, JAN_15, settings=settings)
        cleared = refresh_coefficients(refreshed.clear("douyin"), JAN_15, settings=settings)
        assert cleared.quotation_coefficients["douyin"] is None

    def test_empty_strategy(self, settings):
        assert build_coefficient_snapshot(TalentProcurementStrategy(), JAN_15, settings=settings) == {}

    def test_pure(self, client_strategy, settings):
        """Same input, same output; nothing held between calls."""
        first = build_coefficient_snapshot(client_strategy, JAN_15, settings=settings)
        second = build_coefficient_snapshot(client_strategy, JAN_15, settings=settings)
        assert first == second


def test_edit_by_replacing_item(framework_strategy, january_item, settings):
    """Editing a window replaces the item by id and changes the coefficient."""
    edited = framework_strategy.with_config(january_item.replace(discount_rate=0.5))
    assert len(edited.configs) == 2
    coefficients = compute_all_coefficients({"douyin": edited}, JAN_15, settings=settings)
    # 500 + 50 + 52.5 = 602.5
    assert coefficients["douyin"] == pytest.approx(0.6025)


def test_item_removed_from_list(framework_strategy, settings):
    trimmed = framework_strategy.without_config("cfg_jan")
    coefficients = compute_all_coefficients({"douyin": trimmed}, JAN_15, settings=settings)
    assert coefficients["douyin"] == pytest.approx(0.95)


def test_item_default_rate_from_platform(settings):
    item = PricingConfigItem.default(platform_fee_rate=0.05)
    assert item.platform_fee_rate == 0.05
    strategy = PlatformPricingStrategy(enabled=True, configs=[item])
    # 1000 + 50 → 1.05
    assert compute_all_coefficients({"douyin": strategy}, JAN_15, settings=settings) == {
        "douyin": pytest.approx(1.05),
    }
