"""
Support Log Formatter - readable, injection-safe log lines.

This package renders a log record (timestamp, thread id, level, source,
message and an optional error chain) into a multi-line string that is
easy to read and grep. Line breaks embedded in messages are marked so
that logged text cannot fake additional log lines.

Usage:
    import logging
    from support_log_formatter import SupportLogFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(SupportLogFormatter())
    logging.getLogger().addHandler(handler)
"""

__version__ = "0.1.0"

# Public API exports
from support_log_formatter.config import FormatterSettings, get_settings
from support_log_formatter.errors import ChainRenderError, ConfigurationError, FormatterError
from support_log_formatter.logging import SupportLogFormatter, get_logger, setup_logger
from support_log_formatter.formatting import (
    ChainRenderer,
    ErrorInfo,
    MessageTransformer,
    RecordFormatter,
    StackFrame,
    SupportLogRecord,
    abbreviate_class_name,
    format_error_chain,
    print_error_chain,
    transform_message,
)
