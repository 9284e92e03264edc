from __future__ import annotations
import logging
import sys
from typing import Union

from connect_four.config import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: Union[str, int] = LOG_LEVEL) -> None:
    """Send package logs to stderr so they never mix with the board on stdout."""
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger("connect_four")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
