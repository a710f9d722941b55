"""
Console logging setup using the support log format.
"""

import logging
import sys
from typing import Optional, TextIO

from support_log_formatter.config import FormatterSettings
from support_log_formatter.logging.formatters import SupportLogFormatter


def setup_logger(
    name: str,
    level: str = "INFO",
    settings: Optional[FormatterSettings] = None,
    stream: Optional[TextIO] = None,
    debug: bool = False,
) -> logging.Logger:
    """
    Create and configure a logger instance.

    Args:
        name: Logger name (usually __name__)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        settings: Optional formatter settings
        stream: Stream to write to (default: stdout)
        debug: If True, sets level to DEBUG regardless of level parameter

    Returns:
        Configured logger instance
    """
    # Convert string level to logging constant
    log_level = getattr(logging, level.upper(), logging.INFO)
    if debug:
        log_level = logging.DEBUG

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Remove existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(SupportLogFormatter(settings))

    logger.addHandler(console_handler)

    return logger
