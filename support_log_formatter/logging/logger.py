"""
Logger access for the support log formatter's own diagnostics.

The package never configures handlers for its own loggers; the package
logger only carries a ``NullHandler`` so nothing is printed unless the
application configures logging.
"""

import logging
from typing import Dict, Optional

# Type alias for Python's standard logger
Logger = logging.Logger

PACKAGE_LOGGER_NAME = "support_log_formatter"

# Cache for loggers to avoid creating duplicates
_loggers: Dict[str, Logger] = {}

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> Logger:
    """
    Get a logger with the given name.

    This function returns a cached logger if it exists, or creates a new one.

    Args:
        name: The name of the logger, typically the module name

    Returns:
        A logger instance

    Example:
        ```python
        logger = get_logger(__name__)
        logger.debug("Error chain left out of log record")
        ```
    """
    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)
    _loggers[name] = logger

    return logger


def ensure_logger(
    logger: Optional[Logger] = None,
    name: Optional[str] = None,
) -> Logger:
    """
    Ensure a logger instance is available by either using the provided one or creating a new one.

    Args:
        logger: An existing logger instance to use if provided
        name: Module name (usually __name__) for creating a new logger if needed

    Returns:
        Either the provided logger or a newly created one
    """
    if logger:
        return logger

    if not name:
        raise ValueError("Module name must be provided when logger is not specified")

    return get_logger(name)
