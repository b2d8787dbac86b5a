"""Result types: the contract between the engine and its callers.

Everything here is plain data.  Validation failures travel as a
``ValidationReport``; nothing in this module raises for user input.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from talent_pricing.config.strategy import PricingModel

ConfigStatus = Literal["active", "upcoming", "expired", "permanent"]

ChangeType = Literal[
    "config_create",
    "config_update",
    "config_delete",
    "model_change",
    "platform_enable",
    "platform_disable",
    "platform_clear",
]


# ═══════════════════════════════════════════════════════════════════════════
# Coefficient
# ═══════════════════════════════════════════════════════════════════════════

class CoefficientBreakdown(BaseModel):
    """Every intermediate amount of one coefficient evaluation.

    Amounts are unrounded and expressed on ``base_amount``; only
    ``coefficient`` is rounded.
    """

    model_config = ConfigDict(frozen=True)

    base_amount: float
    platform_fee_amount: float
    discounted_amount: float
    service_fee_amount: float
    tax_amount: float
    final_amount: float
    coefficient: float
    """round(final_amount / base_amount, decimals)."""


# ═══════════════════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════════════════

class ValidationReport(BaseModel):
    """Outcome of validating a configuration tree.  Save is blocked unless ``valid``."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: list[str] = Field(default_factory=list)

    @property
    def first_error(self) -> str | None:
        return self.errors[0] if self.errors else None

    @classmethod
    def from_errors(cls, errors: list[str]) -> ValidationReport:
        return cls(valid=not errors, errors=list(errors))


class OverlapCheck(BaseModel):
    """Result of checking one new window against the existing ones."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    error: str | None = None


# ═══════════════════════════════════════════════════════════════════════════
# Project snapshot
# ═══════════════════════════════════════════════════════════════════════════

class ProjectQuoteSnapshot(BaseModel):
    """Coefficients and pricing modes frozen into a project at creation time.

    Never recomputed: later edits to the client's strategy do not reach it.
    """

    model_config = ConfigDict(frozen=True)

    quotation_coefficients: dict[str, float] = Field(default_factory=dict)
    pricing_models: dict[str, PricingModel] = Field(default_factory=dict)
    """Pricing mode of every enabled platform at freeze time."""
    as_of: date
    """Reference date the effective configurations were resolved for."""
    frozen_at: datetime


# ═══════════════════════════════════════════════════════════════════════════
# Change history
# ═══════════════════════════════════════════════════════════════════════════

class PricingChange(BaseModel):
    """One audit record describing a difference between two strategies."""

    model_config = ConfigDict(frozen=True)

    change_type: ChangeType
    platform: str
    config_id: str | None = None
    before: Any = None
    """Previous value (document form), None for creations."""
    after: Any = None
    """New value (document form), None for deletions."""


# ═══════════════════════════════════════════════════════════════════════════
# Display metadata
# ═══════════════════════════════════════════════════════════════════════════

class PricingModeInfo(BaseModel):
    """Display metadata for a pricing mode."""

    model_config = ConfigDict(frozen=True)

    label: str
    color_tag: str
    explanation: str
    coefficient_label: str
    status_text: str


class ConfigStatusInfo(BaseModel):
    """Display metadata for a configuration status."""

    model_config = ConfigDict(frozen=True)

    label: str
    color_tag: str
