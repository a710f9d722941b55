"""
Logging integration for the support log formatter.

This module provides the ``logging.Formatter`` subclass and a small helper
that attaches it to a console handler.

Limitations:
- Only console (stream) logging is set up by setup_logger.
- No file logging, log rotation, or external service integration.
"""

from support_log_formatter.logging.logger import Logger, ensure_logger, get_logger
from support_log_formatter.logging.formatters import SupportLogFormatter
from support_log_formatter.logging.manager import setup_logger

__all__ = [
    "Logger",
    "get_logger",
    "ensure_logger",
    "setup_logger",
    "SupportLogFormatter",  # Public API
]
