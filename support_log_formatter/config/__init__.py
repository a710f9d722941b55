"""
Configuration module for the support log formatter.

This module provides:
- FormatterSettings: the settings class, supporting environment variable loading.
- get_settings: cached factory returning the process-wide settings.

Example environment variables:

SUPPORT_LOG_FORMATTER_DO_NOT_FORMAT_FOR_CLI=false
SUPPORT_LOG_FORMATTER_NEWLINE_INDICATOR="> "
"""

from .base import ENV_PREFIX, FormatterSettings
from .settings import get_settings

__all__ = [
    "ENV_PREFIX",
    "FormatterSettings",
    "get_settings",
]
