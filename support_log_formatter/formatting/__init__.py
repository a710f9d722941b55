"""
Formatting engine: message transformation, error chain rendering and
record layout.
"""

from support_log_formatter.formatting.chain import (
    NO_DETAILS,
    ChainRenderer,
    ErrorInfo,
    StackFrame,
    SupportsCustomTrace,
    format_error_chain,
    print_error_chain,
)
from support_log_formatter.formatting.formatter import RecordFormatter, format_timestamp
from support_log_formatter.formatting.names import abbreviate_class_name
from support_log_formatter.formatting.record import SupportLogRecord
from support_log_formatter.formatting.transform import MessageTransformer, transform_message

__all__ = [
    "NO_DETAILS",
    "ChainRenderer",
    "ErrorInfo",
    "StackFrame",
    "SupportsCustomTrace",
    "format_error_chain",
    "print_error_chain",
    "RecordFormatter",
    "format_timestamp",
    "abbreviate_class_name",
    "SupportLogRecord",
    "MessageTransformer",
    "transform_message",
]
