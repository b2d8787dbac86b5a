"""Platform strategies and the per-client talent procurement strategy.

Persisted document shape (``businessStrategies.talentProcurement``)::

    {
      "enabled": true,
      "platformPricingConfigs": {
        "douyin":      {"enabled": true, "pricingModel": "framework", "configs": [...]},
        "xiaohongshu": {"enabled": true, "pricingModel": "project", "configs": null},
        "kuaishou":    null
      },
      "quotationCoefficients": {"douyin": 0.955, "kuaishou": null}
    }

A missing platform key means "never configured"; an explicit ``null`` means
"configured once, then cleared".  In memory the three cases are the tagged
slots ``NotConfigured``, ``Configured`` and ``Cleared``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from pydantic.alias_generators import to_camel

from talent_pricing.config.config_item import PricingConfigItem
from talent_pricing.exceptions import MalformedStrategyError

PricingModel = Literal["framework", "project", "hybrid"]

PRICING_MODELS: tuple[str, ...] = ("framework", "project", "hybrid")


class PlatformPricingStrategy(BaseModel):
    """Pricing mode plus the list of time-boxed configurations for one platform.

    ``configs`` is ``None`` in ``project`` mode (prices are negotiated per
    project).  A project strategy carrying a list is a malformed shape.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    enabled: bool = False
    pricing_model: PricingModel = "framework"
    configs: list[PricingConfigItem] | None = None

    @model_validator(mode="after")
    def _check_shape(self) -> PlatformPricingStrategy:
        if self.pricing_model == "project" and self.configs is not None:
            raise ValueError("project pricing mode must not carry a configuration list")
        if self.configs:
            seen: set[str] = set()
            for item in self.configs:
                if item.id in seen:
                    raise ValueError(f"duplicate configuration id '{item.id}'")
                seen.add(item.id)
        return self

    @property
    def uses_coefficient(self) -> bool:
        """Framework and hybrid modes price through a coefficient."""
        return self.pricing_model != "project"

    def get_config(self, config_id: str) -> PricingConfigItem | None:
        for item in self.configs or []:
            if item.id == config_id:
                return item
        return None

    def with_config(self, item: PricingConfigItem) -> PlatformPricingStrategy:
        """Add ``item``, or replace the existing item with the same id."""
        if not self.uses_coefficient:
            raise MalformedStrategyError("cannot add a configuration in project pricing mode")
        configs = list(self.configs or [])
        for index, existing in enumerate(configs):
            if existing.id == item.id:
                configs[index] = item
                break
        else:
            configs.append(item)
        return self.model_copy(update={"configs": configs})

    def without_config(self, config_id: str) -> PlatformPricingStrategy:
        """Drop the item with ``config_id``; unknown ids are a no-op."""
        if self.configs is None:
            return self
        configs = [item for item in self.configs if item.id != config_id]
        return self.model_copy(update={"configs": configs})

    def with_model(self, pricing_model: PricingModel) -> PlatformPricingStrategy:
        """Switch pricing mode.

        Entering ``project`` drops the list; leaving it starts an empty one.
        """
        if pricing_model == self.pricing_model:
            return self
        if pricing_model == "project":
            configs = None
        elif self.pricing_model == "project":
            configs = []
        else:
            configs = self.configs
        return PlatformPricingStrategy(enabled=self.enabled, pricing_model=pricing_model, configs=configs)

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# ═══════════════════════════════════════════════════════════════════════════
# Platform slots
# ═══════════════════════════════════════════════════════════════════════════

class NotConfigured(BaseModel):
    """The platform was never configured for this client."""

    model_config = ConfigDict(frozen=True)
    kind: Literal["not_configured"] = "not_configured"


class Configured(BaseModel):
    """The platform has a live strategy."""

    model_config = ConfigDict(frozen=True)
    kind: Literal["configured"] = "configured"
    strategy: PlatformPricingStrategy


class Cleared(BaseModel):
    """The platform's configuration was explicitly removed."""

    model_config = ConfigDict(frozen=True)
    kind: Literal["cleared"] = "cleared"


PlatformSlot = Annotated[Union[NotConfigured, Configured, Cleared], Field(discriminator="kind")]

NOT_CONFIGURED = NotConfigured()
CLEARED = Cleared()


# ═══════════════════════════════════════════════════════════════════════════
# Client-level strategy
# ═══════════════════════════════════════════════════════════════════════════

class TalentProcurementStrategy(BaseModel):
    """All platform strategies of one client plus the persisted coefficient snapshot.

    Immutable: every edit returns a new value, so a copy handed to a project
    at creation time can never drift with later edits.
    """

    model_config = ConfigDict(frozen=True)

    platform_pricing_configs: dict[str, PlatformSlot] = Field(default_factory=dict)
    quotation_coefficients: dict[str, float | None] = Field(
        default_factory=dict,
        description="Last computed coefficient per platform; None marks a cleared platform.",
    )

    @computed_field
    @property
    def enabled(self) -> bool:
        """True iff at least one configured platform is enabled."""
        return any(strategy.enabled for strategy in self.configured_strategies().values())

    def slot(self, platform: str) -> NotConfigured | Configured | Cleared:
        return self.platform_pricing_configs.get(platform, NOT_CONFIGURED)

    def configured_strategies(self) -> dict[str, PlatformPricingStrategy]:
        """Live strategies only, keyed by platform."""
        return {
            platform: slot.strategy
            for platform, slot in self.platform_pricing_configs.items()
            if isinstance(slot, Configured)
        }

    def cleared_platforms(self) -> list[str]:
        return [p for p, slot in self.platform_pricing_configs.items() if isinstance(slot, Cleared)]

    def configure(self, platform: str, strategy: PlatformPricingStrategy) -> TalentProcurementStrategy:
        configs = dict(self.platform_pricing_configs)
        configs[platform] = Configured(strategy=strategy)
        return self.model_copy(update={"platform_pricing_configs": configs})

    def clear(self, platform: str) -> TalentProcurementStrategy:
        """Tombstone ``platform`` so the persisted record remembers it was removed."""
        configs = dict(self.platform_pricing_configs)
        configs[platform] = CLEARED
        return self.model_copy(update={"platform_pricing_configs": configs})

    def with_coefficients(self, coefficients: Mapping[str, float | None]) -> TalentProcurementStrategy:
        return self.model_copy(update={"quotation_coefficients": dict(coefficients)})

    # --- Persistence shape -------------------------------------------------

    def to_document(self) -> dict[str, Any]:
        platforms: dict[str, Any] = {}
        for platform, slot in self.platform_pricing_configs.items():
            if isinstance(slot, Configured):
                platforms[platform] = slot.strategy.to_document()
            elif isinstance(slot, Cleared):
                platforms[platform] = None
        return {
            "enabled": self.enabled,
            "platformPricingConfigs": platforms,
            "quotationCoefficients": dict(self.quotation_coefficients),
        }

    @classmethod
    def from_document(cls, document: Mapping[str, Any] | None) -> TalentProcurementStrategy:
        """Inverse of :meth:`to_document`.  ``enabled`` is re-derived, not read."""
        if not document:
            return cls()
        slots: dict[str, NotConfigured | Configured | Cleared] = {}
        for platform, raw in (document.get("platformPricingConfigs") or {}).items():
            if raw is None:
                slots[platform] = CLEARED
            elif isinstance(raw, Mapping):
                slots[platform] = Configured(strategy=PlatformPricingStrategy.model_validate(raw))
            else:
                raise MalformedStrategyError(f"expected an object or null, got {type(raw).__name__}", platform)
        return cls(
            platform_pricing_configs=slots,
            quotation_coefficients=dict(document.get("quotationCoefficients") or {}),
        )
