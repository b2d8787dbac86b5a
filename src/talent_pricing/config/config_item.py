"""One time-boxed fee/discount/tax configuration for a platform."""

from __future__ import annotations

import math
import secrets
import string
import time
from datetime import date, datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ServiceFeeBase = Literal["beforeDiscount", "afterDiscount"]
TaxCalculationBase = Literal["excludeServiceFee", "includeServiceFee"]

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_config_id() -> str:
    """``cfg_<epoch-ms>_<6 base36 chars>``, unique enough within one platform list."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(6))
    return f"cfg_{int(time.time() * 1000)}_{suffix}"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PricingConfigItem(BaseModel):
    """A single pricing window.

    Items are never mutated; an edit produces a replacement with the same
    ``id`` (see :meth:`replace`).  Rates are stored as given and range-checked
    by the validator, so an operator typo surfaces as a readable error
    instead of a construction failure.  Non-finite numbers are rejected here.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
        extra="forbid",
    )

    id: str = Field(default_factory=generate_config_id, min_length=1)

    # --- Rates (fractions, expected in [0, 1]) ---
    discount_rate: float = Field(default=1.0, description="Multiplier applied to the base price (0.8 = 20% off)")
    service_fee_rate: float = Field(default=0.0, description="Agency service fee rate")
    platform_fee_rate: float = Field(default=0.0, description="Hosting platform's fixed cut")

    # --- Order-of-operations toggles ---
    includes_platform_fee: bool = Field(
        default=False,
        description="True: discount applies to (base + platform fee). "
                    "False: discount applies to base only, platform fee added after.",
    )
    service_fee_base: ServiceFeeBase = Field(
        default="beforeDiscount",
        description="Amount the service fee rate is applied to.",
    )
    includes_tax: bool = Field(default=True, description="Quote is already tax-inclusive")
    tax_calculation_base: TaxCalculationBase = Field(
        default="excludeServiceFee",
        description="Only relevant when includes_tax is False.",
    )

    # --- Validity window (inclusive) ---
    valid_from: date | None = None
    valid_to: date | None = None
    is_permanent: bool = Field(default=False, description="Always in force; dates are ignored")

    # --- Audit ---
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @classmethod
    def default(cls, platform_fee_rate: float = 0.0) -> PricingConfigItem:
        """Blank item offered when an operator adds a new window."""
        return cls(platform_fee_rate=platform_fee_rate)

    @property
    def has_window(self) -> bool:
        """True when at least one date bound is set and the item is not permanent."""
        return not self.is_permanent and (self.valid_from is not None or self.valid_to is not None)

    @property
    def window_days(self) -> float:
        """Length of the validity window in days; ``inf`` when open on either side."""
        if self.is_permanent or self.valid_from is None or self.valid_to is None:
            return math.inf
        return float((self.valid_to - self.valid_from).days)

    def covers(self, day: date) -> bool:
        """Whether this item is in force on ``day``."""
        if self.is_permanent:
            return True
        if self.valid_from is not None and day < self.valid_from:
            return False
        if self.valid_to is not None and day > self.valid_to:
            return False
        return True

    def replace(self, **changes: Any) -> PricingConfigItem:
        """Return an edited copy with the same id and a fresh ``updated_at``."""
        changes.pop("id", None)
        data = self.model_dump()
        data.update(changes)
        data["updated_at"] = _utcnow()
        return type(self).model_validate(data)

    def to_document(self) -> dict[str, Any]:
        """Persisted form: camelCase keys, ISO dates."""
        return self.model_dump(mode="json", by_alias=True)
