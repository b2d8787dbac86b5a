"""Engine exceptions.

Only defects raise.  User-correctable problems (out-of-range rates, missing
configurations, bad windows) come back as a ``ValidationReport`` and a
resolution miss is simply ``None``.
"""

from __future__ import annotations


class PricingEngineError(Exception):
    """Base class for engine errors."""


class MalformedStrategyError(PricingEngineError):
    """Input does not have the shape the engine expects.

    Raised for collaborator bugs such as a ``project`` strategy that still
    carries a configuration list, never for user data problems.
    """

    def __init__(self, reason: str, platform: str | None = None):
        self.reason = reason
        self.platform = platform
        if platform is None:
            super().__init__(f"Malformed pricing strategy: {reason}")
        else:
            super().__init__(f"Malformed pricing strategy for platform '{platform}': {reason}")
