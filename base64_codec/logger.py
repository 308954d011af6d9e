#!/usr/bin/env python3
"""
Base64 Codec - Logger Module
Logging setup for the CLI.

Log records go to stderr so they never mix with codec output on stdout.
"""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "base64_codec"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_level: str = "WARNING", stream: Optional[TextIO] = None) -> logging.Logger:
    """Configure the package logger

    Existing handlers are cleared, so calling this again replaces the
    previous configuration instead of duplicating output.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        stream: handler stream, defaults to the current sys.stderr

    Returns:
        The configured package logger
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger or one of its children"""
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
