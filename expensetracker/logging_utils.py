"""Mini README: Application-wide logging helpers for the expense tracker.

Structure:
    * configure_root_logger - installs the shared stream handler once.
    * get_logger - module logger factory used across the package.

Usage:
    Modules call ``get_logger(__name__)`` at import time and keep the result
    in a module-level ``LOGGER``. The root handler is attached a single time
    so reloading the web app during development does not duplicate output.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Attach the tracker's formatter to the root logger on first use.

    Later calls only adjust the level, which lets the CLI apply the configured
    ``log_level`` after modules have already created their loggers.
    """

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        root_logger.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
