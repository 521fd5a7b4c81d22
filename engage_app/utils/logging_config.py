"""Logging setup for the EngageSphere server process."""

from __future__ import annotations

import logging
from logging import Logger

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Per-request lines, raised to WARNING.
_CHATTY_LOGGERS = ("uvicorn.access",)


def configure_logging(level: int = logging.INFO, *, quiet_access_log: bool = True) -> Logger:
    """Configure root logging once and return the ``engage_app`` logger."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    if quiet_access_log:
        for name in _CHATTY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    return logging.getLogger("engage_app")
