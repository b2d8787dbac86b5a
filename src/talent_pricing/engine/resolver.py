"""Effective configuration resolution.

Selects, among the time-boxed configurations of one platform, the one in
force on a reference date.  Also classifies items for display and finds
overlapping windows for the validator.

Selection rules:
  candidate  ⇔ is_permanent, or valid_from ≤ as_of ≤ valid_to
               (an absent bound is unbounded on that side)
  0 candidates → None  (no effective pricing; not an error)
  1 candidate  → it
  n candidates → dated before open-ended, then newest created_at,
                 then narrowest window, then list order
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Sequence

from talent_pricing.config.config_item import PricingConfigItem
from talent_pricing.models.results import ConfigStatus, OverlapCheck

logger = logging.getLogger(__name__)


def to_reference_date(as_of: date | datetime | None = None) -> date:
    """Normalise a reference moment to a calendar date (UTC for aware datetimes)."""
    if as_of is None:
        return datetime.now(timezone.utc).date()
    if isinstance(as_of, datetime):
        if as_of.tzinfo is not None:
            as_of = as_of.astimezone(timezone.utc)
        return as_of.date()
    return as_of


def _created_ts(item: PricingConfigItem) -> float:
    created = item.created_at
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return created.timestamp()


def _is_open_ended(item: PricingConfigItem) -> bool:
    return item.is_permanent or (item.valid_from is None and item.valid_to is None)


def resolve_effective_config(
    configs: Sequence[PricingConfigItem] | None,
    as_of: date | datetime | None = None,
) -> PricingConfigItem | None:
    """Return the configuration in force on ``as_of``, or None."""
    if not configs:
        return None

    day = to_reference_date(as_of)
    candidates = [(index, item) for index, item in enumerate(configs) if item.covers(day)]

    if not candidates:
        logger.debug("No configuration covers %s among %d item(s)", day, len(configs))
        return None
    if len(candidates) == 1:
        return candidates[0][1]

    candidates.sort(
        key=lambda pair: (
            _is_open_ended(pair[1]),
            -_created_ts(pair[1]),
            pair[1].window_days,
            pair[0],
        )
    )
    chosen = candidates[0][1]
    logger.debug(
        "%d configurations cover %s; picked %s",
        len(candidates), day, chosen.id,
    )
    return chosen


def config_status(item: PricingConfigItem, as_of: date | datetime | None = None) -> ConfigStatus:
    """Classify an item relative to ``as_of``.

    Permanent and dateless items are ``permanent``; otherwise the item is
    ``upcoming``, ``expired`` or ``active`` depending on its window.
    """
    if _is_open_ended(item):
        return "permanent"
    day = to_reference_date(as_of)
    if item.valid_from is not None and item.valid_from > day:
        return "upcoming"
    if item.valid_to is not None and item.valid_to < day:
        return "expired"
    return "active"


# ═══════════════════════════════════════════════════════════════════════════
# Overlap detection
# ═══════════════════════════════════════════════════════════════════════════

def _bounds(item: PricingConfigItem) -> tuple[date, date]:
    return (item.valid_from or date.min, item.valid_to or date.max)


def windows_overlap(a: PricingConfigItem, b: PricingConfigItem) -> bool:
    """True if two dated windows share at least one day."""
    a_from, a_to = _bounds(a)
    b_from, b_to = _bounds(b)
    return a_from <= b_to and b_from <= a_to


def find_time_overlap(
    configs: Sequence[PricingConfigItem] | None,
    exclude_id: str | None = None,
) -> tuple[PricingConfigItem, PricingConfigItem] | None:
    """First pair of dated items whose windows intersect.

    Permanent and dateless items never take part.  ``exclude_id`` skips the
    item being edited.
    """
    dated = [c for c in configs or [] if c.has_window and c.id != exclude_id]
    for i, a in enumerate(dated):
        for b in dated[i + 1:]:
            if windows_overlap(a, b):
                return a, b
    return None


def format_window(item: PricingConfigItem) -> str:
    start = item.valid_from.isoformat() if item.valid_from else "…"
    end = item.valid_to.isoformat() if item.valid_to else "…"
    return f"{start} ~ {end}"


def check_no_overlap(
    new_item: PricingConfigItem,
    existing: Sequence[PricingConfigItem],
    exclude_id: str | None = None,
) -> OverlapCheck:
    """Check a new or edited window against the existing list before it is added."""
    if not new_item.has_window:
        return OverlapCheck(valid=True)

    for other in existing:
        if other.id == exclude_id or other.id == new_item.id or not other.has_window:
            continue
        if windows_overlap(new_item, other):
            return OverlapCheck(
                valid=False,
                error=f"Window ({format_window(new_item)}) overlaps existing configuration "
                      f"({format_window(other)})",
            )
    return OverlapCheck(valid=True)
