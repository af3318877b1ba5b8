"""Logging utilities for the cbr_fx package."""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None


def get_logger(name: str = "cbr_fx") -> logging.Logger:
    """Return a module-level logger configured with a simple formatter."""
    global _LOGGER
    if _LOGGER is None:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        _LOGGER = logging.getLogger(name)
    return logging.getLogger(name)


def set_level(level: int) -> None:
    """Adjust the level of every ``cbr_fx`` logger at once."""

    logging.getLogger("cbr_fx").setLevel(level)
