"""Logger factory for nlpstats."""

from __future__ import annotations

import logging
import os
from typing import Final

_LEVEL_NAME: Final[str] = os.getenv("NLPSTATS_LOG_LEVEL", "WARNING").upper()
_PACKAGE_LOGGER_LEVEL: Final[int] = getattr(logging, _LEVEL_NAME, logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a module-level logger without touching handlers."""
    logger = logging.getLogger(name)
    logger.setLevel(_PACKAGE_LOGGER_LEVEL)
    return logger
