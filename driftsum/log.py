"""Logging configuration for driftsum."""

import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "DRIFTSUM_LOG_LEVEL"


def setup_logging(level: Optional[str] = None, format_type: str = "structured") -> logging.Logger:
    """
    Attach a stdout handler to the ``driftsum`` logger.

    Args:
        level: Level name; defaults to ``$DRIFTSUM_LOG_LEVEL`` or INFO
        format_type: 'structured' for timestamped records, anything else for terse ones

    Returns:
        The configured package logger
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = level_map.get(level.upper(), logging.INFO)

    if format_type == "structured":
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    else:
        formatter = logging.Formatter('%(levelname)s - %(message)s')

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    logger = logging.getLogger("driftsum")
    logger.setLevel(log_level)
    for existing in list(logger.handlers):
        if type(existing) is logging.StreamHandler:
            logger.removeHandler(existing)
    logger.addHandler(handler)
    return logger
