"""
Logging setup for the Peer-Tutoring Matchmaking System.

Modules log through ``logging.getLogger(__name__)``; this installs the console
handler on the package logger once.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import LOG_LEVEL

LOGGER_NAME = "peermatch"

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the package logger with a single stderr handler."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, (level or LOG_LEVEL).upper(), logging.WARNING))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=_CONSOLE_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(handler)
    return logger
