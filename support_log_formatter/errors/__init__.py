"""
Error types for the support log formatter.
"""

from support_log_formatter.errors.exceptions import (
    ChainRenderError,
    ConfigurationError,
    FormatterError,
)

__all__ = [
    "FormatterError",
    "ConfigurationError",
    "ChainRenderError",
]
