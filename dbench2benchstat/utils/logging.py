"""Logging configuration helpers."""

import logging
from typing import Optional

PACKAGE_LOGGER = "dbench2benchstat"


def get_logger(name: Optional[str] = None, level: str = "INFO") -> logging.Logger:
    """Return the package logger, writing diagnostics to stderr."""
    logger = logging.getLogger(name or PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
