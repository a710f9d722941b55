"""
Formatting of a complete log record.

A formatted record is one line holding the timestamp, thread id, level,
source location and message, followed by the rendered error chain when
the record carries an error:

    1970-01-01 00:00:00.000+0000 [id=999]	INFO	some.pkg.Catcher#robust: some message
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from support_log_formatter.config import FormatterSettings, get_settings
from support_log_formatter.formatting.chain import ChainRenderer
from support_log_formatter.formatting.names import abbreviate_class_name
from support_log_formatter.formatting.record import SupportLogRecord
from support_log_formatter.formatting.transform import MessageTransformer
from support_log_formatter.logging.logger import ensure_logger

METHOD_SOURCE_WIDTH = 32
CLASS_SOURCE_WIDTH = 40


def format_timestamp(timestamp_ms: int) -> str:
    """
    Format milliseconds since the epoch as ``yyyy-MM-dd HH:mm:ss.SSSZ`` in UTC.

    Timestamps outside the range of ``datetime`` are written as the raw
    millisecond count.

    Example:
        ```python
        format_timestamp(0)  # "1970-01-01 00:00:00.000+0000"
        ```
    """
    seconds, millis = divmod(timestamp_ms, 1000)
    try:
        moment = datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return str(timestamp_ms)
    return f"{moment:%Y-%m-%d %H:%M:%S}.{millis:03d}{moment:%z}"


class RecordFormatter:
    """
    Render one SupportLogRecord into a string.

    Args:
        settings: Optional formatter settings; the process-wide settings
            are used when omitted
        logger: Optional logger for problems met while formatting
    """

    def __init__(
        self,
        settings: Optional[FormatterSettings] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.settings = settings or get_settings()
        self.transformer = MessageTransformer(self.settings)
        self.renderer = ChainRenderer(self.transformer)
        self.log = ensure_logger(logger, __name__)

    def format(self, record: SupportLogRecord) -> str:
        """
        Format the record.

        Errors raised while rendering the error chain are logged and the
        chain is left out; the rest of the record is always returned.

        Args:
            record: The record to format

        Returns:
            The formatted record, ending with a newline
        """
        parts = [
            format_timestamp(record.timestamp_ms),
            f" [id={record.thread_id}]",
            f"\t{record.level}\t",
            self.format_source(record),
        ]
        if record.message is not None:
            parts.append(": " + self.transformer.transform(record.message, ""))
        parts.append("\n")

        if record.error is not None:
            try:
                parts.append(self.renderer.render(record.error))
            except Exception as e:
                self.log.debug(f"Error chain left out of log record: {e!r}")

        if record.stack_info is not None:
            parts.append(self.transformer.transform(record.stack_info, ""))
            parts.append("\n")

        return "".join(parts)

    def format_source(self, record: SupportLogRecord) -> str:
        if record.source_method_name is not None:
            name = abbreviate_class_name(record.source_name, METHOD_SOURCE_WIDTH)
            return f"{name}#{record.source_method_name}"
        return abbreviate_class_name(record.source_name, CLASS_SOURCE_WIDTH)
