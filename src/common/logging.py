"""
Logging configuration helpers.
It centralizes process-wide logging setup for the API server and maintenance scripts.
Keeping this helper isolated means entrypoints configure logging once and modules just call getLogger.
"""

from __future__ import annotations

import logging

_LOGGING_CONFIGURED = False


def configure_logging(level_name: str = "INFO") -> None:
    """Configure process-wide logging at the given level name."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level = getattr(logging, level_name.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True
