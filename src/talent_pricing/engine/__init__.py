"""Engine: resolution, coefficient computation, aggregation and validation."""

from talent_pricing.engine.resolver import (
    check_no_overlap,
    config_status,
    find_time_overlap,
    resolve_effective_config,
)
from talent_pricing.engine.coefficient import compute_breakdown, compute_coefficient, is_coefficient_in_bounds
from talent_pricing.engine.aggregator import (
    build_coefficient_snapshot,
    compute_all_coefficients,
    refresh_coefficients,
)
from talent_pricing.engine.validator import validate_platform_strategy, validate_strategies
from talent_pricing.engine.project_quote import freeze_project_quote, quote_price
from talent_pricing.engine.history import diff_strategies

__all__ = [
    "resolve_effective_config",
    "config_status",
    "find_time_overlap",
    "check_no_overlap",
    "compute_breakdown",
    "compute_coefficient",
    "is_coefficient_in_bounds",
    "compute_all_coefficients",
    "build_coefficient_snapshot",
    "refresh_coefficients",
    "validate_platform_strategy",
    "validate_strategies",
    # Project creation + audit
    "freeze_project_quote",
    "quote_price",
    "diff_strategies",
]
