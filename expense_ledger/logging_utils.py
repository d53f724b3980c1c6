"""Mini README: Application-wide logging helpers for the expense ledger.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - installs the shared handler and adjusts the level.

Usage:
    Modules import ``get_logger`` at import time. The command line entry point
    calls ``configure_root_logger`` again with the configured level, which only
    updates the level because the handler is installed exactly once. Log lines
    go to stderr so they never interleave with the tabular reports on stdout.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Configure the root logger once and optionally change its level."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if level is not None:
        root_logger.setLevel(level.upper() if isinstance(level, str) else level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    if level is None:
        root_logger.setLevel(logging.WARNING)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
