"""Logging setup for the gateway's ``wagw.*`` loggers."""

from __future__ import annotations

import logging
from typing import Optional

from server.config import get_settings

logger = logging.getLogger("wagw.server")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Per-request access lines drown out validation and adapter logs
_QUIET_LOGGERS = ("httpx", "uvicorn.access")


def configure_logging(level: Optional[str] = None) -> None:
    """Install a root handler (once) and set the ``wagw`` level.

    `level` defaults to the configured ``LOG_LEVEL``; unknown names fall back
    to INFO.
    """
    if level is None:
        level = get_settings().log_level
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    logging.getLogger("wagw").setLevel(numeric_level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
