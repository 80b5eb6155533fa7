"""Process-wide logging for binsample.

Library modules only ever call `get_logger(<component>)`; handlers are attached
once, by the CLI, through `setup_logger()`.
"""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER_NAME = "binsample"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if name:
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)


def setup_logger(verbose: bool = False) -> logging.Logger:
    """
    Configure the root 'binsample' logger:
      - INFO to stderr (DEBUG when verbose)
    Safe to call more than once; the level is updated and a single handler kept.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)
    logger.propagate = False

    for h in list(logger.handlers):
        logger.removeHandler(h)

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s"))
    logger.addHandler(ch)
    return logger


__all__ = [
    "get_logger",
    "setup_logger",
]
