"""Centralized logging configuration.
Call setup_logging() once at application startup.
"""

from __future__ import annotations

import logging
import sys

HANDLER_NAME = "talent_pricing"


def setup_logging(level: str | None = None) -> None:
    """Attach the engine's stream handler to the root logger."""
    root = logging.getLogger()
    if level is None:
        from talent_pricing.config.settings import get_settings
        level = get_settings().log_level
    level = level.upper()

    root.setLevel(getattr(logging, level))

    # Avoid duplicate handlers on repeated calls
    if any(h.get_name() == HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root.addHandler(handler)
