"""
Base exception classes for the support log formatter.

This module provides a small exception hierarchy used across the package.
Configuration problems and failures while rendering an error chain each
have their own type so callers can tell them apart.
"""

from typing import Any, Dict, Optional


class FormatterError(Exception):
    """
    Base exception for all formatter errors.

    All custom exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message
        code: Error code identifier (default: FORMATTER_ERROR)
        details: Additional error details
    """

    def __init__(
        self,
        message: str = "An unexpected formatting error occurred",
        code: str = "FORMATTER_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(FormatterError):
    """
    Exception raised when the formatter settings cannot be loaded.

    Attributes:
        fields: Names of the settings that failed validation
    """

    def __init__(
        self,
        message: str = "Invalid formatter configuration",
        fields: Optional[list] = None,
        code: str = "CONFIGURATION_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.fields = fields or []
        if fields:
            details = details or {}
            details["fields"] = fields

        super().__init__(message=message, code=code, details=details)


class ChainRenderError(FormatterError):
    """Exception raised when an error chain cannot be rendered."""

    def __init__(
        self,
        message: str = "Could not render error chain",
        error_summary: Optional[str] = None,
        code: str = "CHAIN_RENDER_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.error_summary = error_summary
        if error_summary:
            details = details or {}
            details["error_summary"] = error_summary

        super().__init__(message=message, code=code, details=details)
