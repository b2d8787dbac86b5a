"""Pricing change history: audit records between two strategy versions.

The caller stores the records (one collection entry each); this module
only works out what changed.
"""

from __future__ import annotations

from talent_pricing.config.strategy import Cleared, Configured, PlatformPricingStrategy, TalentProcurementStrategy
from talent_pricing.models.results import PricingChange

_DEFAULT_STRATEGY = PlatformPricingStrategy()


def _comparable(document: dict) -> dict:
    return {key: value for key, value in document.items() if key != "updatedAt"}


def _diff_platform(
    platform: str,
    before: PlatformPricingStrategy,
    after: PlatformPricingStrategy,
) -> list[PricingChange]:
    changes: list[PricingChange] = []

    if before.enabled != after.enabled:
        changes.append(PricingChange(
            change_type="platform_enable" if after.enabled else "platform_disable",
            platform=platform,
            before=before.enabled,
            after=after.enabled,
        ))

    if before.pricing_model != after.pricing_model:
        changes.append(PricingChange(
            change_type="model_change",
            platform=platform,
            before=before.pricing_model,
            after=after.pricing_model,
        ))

    old_items = {item.id: item for item in before.configs or []}
    new_items = {item.id: item for item in after.configs or []}

    for config_id, item in new_items.items():
        old = old_items.get(config_id)
        if old is None:
            changes.append(PricingChange(
                change_type="config_create", platform=platform, config_id=config_id,
                after=item.to_document(),
            ))
        elif _comparable(old.to_document()) != _comparable(item.to_document()):
            changes.append(PricingChange(
                change_type="config_update", platform=platform, config_id=config_id,
                before=old.to_document(), after=item.to_document(),
            ))

    for config_id, old in old_items.items():
        if config_id not in new_items:
            changes.append(PricingChange(
                change_type="config_delete", platform=platform, config_id=config_id,
                before=old.to_document(),
            ))

    return changes


def diff_strategies(
    before: TalentProcurementStrategy,
    after: TalentProcurementStrategy,
) -> list[PricingChange]:
    """Every change needed to go from ``before`` to ``after``.

    A platform that loses its live strategy (tombstoned or dropped) yields a
    single ``platform_clear``.  A platform seen for the first time is
    compared against the default strategy (disabled, framework, no items).
    """
    platforms = list(before.platform_pricing_configs)
    platforms += [p for p in after.platform_pricing_configs if p not in before.platform_pricing_configs]

    changes: list[PricingChange] = []
    for platform in platforms:
        old_slot = before.slot(platform)
        new_slot = after.slot(platform)

        if isinstance(new_slot, Configured):
            old = old_slot.strategy if isinstance(old_slot, Configured) else _DEFAULT_STRATEGY
            changes.extend(_diff_platform(platform, old, new_slot.strategy))
        elif isinstance(old_slot, Configured) or (isinstance(new_slot, Cleared) and not isinstance(old_slot, Cleared)):
            changes.append(PricingChange(
                change_type="platform_clear",
                platform=platform,
                before=old_slot.strategy.to_document() if isinstance(old_slot, Configured) else None,
            ))

    return changes
