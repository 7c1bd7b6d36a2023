"""Logging setup shared by the extractor, API and scripts."""

from __future__ import annotations

import logging
from typing import Optional

LOGGER_NAME = "report_extractor"
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Return the package logger, attaching a stream handler on first use.

    *level* is usually ``get_settings().log_level``; without it the current
    level is left alone (INFO after first setup).
    """

    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    if level:
        logger.setLevel(level.upper())
    return logger


__all__ = ["LOGGER_NAME", "configure_logging"]
