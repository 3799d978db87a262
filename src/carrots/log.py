"""Package logger. Diagnostics go to stderr; stdout is reserved for the report."""

from __future__ import annotations

import logging
import sys

from carrots.config import log_level

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

logger = logging.getLogger("carrots")


def configure(level: str | int | None = None) -> logging.Logger:
    """Attach a stderr handler once and set the level (env default)."""
    if level is None:
        level = log_level()
    logger.setLevel(level)

    # avoid stacking handlers on repeated calls
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)
    return logger
