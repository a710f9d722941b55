"""
Log formatter for the standard ``logging`` module.

``SupportLogFormatter`` writes records in a format that is easy to read
and grep:

    2024-05-01 12:00:00.000+0000 [id=140213]	WARNING	app.jobs#run: failed to do stuff
    ValueError: oops
    	at app.jobs.run(jobs.py:42)

Line breaks inside messages and error summaries are marked so that logged
user input cannot forge additional log lines.

Example:
    ```python
    handler = logging.StreamHandler()
    handler.setFormatter(SupportLogFormatter())
    ```

    or with ``logging.config.dictConfig``:

    ```python
    {"formatters": {"support": {"()": "support_log_formatter.SupportLogFormatter"}}}
    ```
"""

import logging
from typing import Optional

from support_log_formatter.config import FormatterSettings
from support_log_formatter.formatting.formatter import RecordFormatter, format_timestamp
from support_log_formatter.formatting.record import SupportLogRecord


class SupportLogFormatter(logging.Formatter):
    """
    Format log records with the support log layout.

    Pass ``extra={"source_class": "..."}`` to a logging call to show a
    class name instead of the logger name.
    """

    def __init__(
        self,
        settings: Optional[FormatterSettings] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the formatter.

        Args:
            settings: Optional formatter settings
            logger: Optional logger for problems met while formatting
        """
        super().__init__()
        self.record_formatter = RecordFormatter(settings, logger)

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the specified record.

        Args:
            record: Log record to format

        Returns:
            The formatted record without its final newline; handlers
            append their own terminator
        """
        text = self.record_formatter.format(SupportLogRecord.from_logging_record(record))
        if text.endswith("\n"):
            text = text[:-1]
        return text

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        millis = int(record.created) * 1000 + int(record.msecs)
        return format_timestamp(millis)

    def formatException(self, ei) -> str:
        return self.record_formatter.renderer.render(ei[1])
