"""
Structured log record consumed by the record formatter.

``SupportLogRecord`` holds exactly the fields that end up in a formatted
line. Records produced by the standard ``logging`` module are converted
with ``SupportLogRecord.from_logging_record``.
"""

import logging
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from support_log_formatter.formatting.chain import ErrorInfo

UNKNOWN_FUNCTION = "(unknown function)"


class SupportLogRecord(BaseModel):
    """
    One log record.

    Attributes:
        timestamp_ms: Milliseconds since the epoch
        thread_id: Identifier of the logging thread
        level: Level name, e.g. ``INFO``; numeric levels are converted
        source_class_name: Class or module that emitted the record
        source_method_name: Method or function that emitted the record
        logger_name: Logger name, used when no source class is known
        message: Message with arguments already resolved
        error: Error to render below the message line
        stack_info: Stack text captured with ``stack_info=True``
    """

    timestamp_ms: int = 0
    thread_id: int = 0
    level: str = "INFO"
    source_class_name: Optional[str] = None
    source_method_name: Optional[str] = None
    logger_name: Optional[str] = None
    message: Optional[str] = None
    error: Optional[Union[ErrorInfo, BaseException]] = Field(default=None)
    stack_info: Optional[str] = None

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @field_validator("level", mode="before")
    def normalize_level(cls, value):
        """Accept numeric ``logging`` levels as well as level names."""
        if isinstance(value, int):
            return logging.getLevelName(value)
        return value

    @property
    def source_name(self) -> Optional[str]:
        """The source class name, falling back to the logger name."""
        if self.source_class_name is None:
            return self.logger_name
        return self.source_class_name

    @classmethod
    def from_logging_record(cls, record: logging.LogRecord) -> "SupportLogRecord":
        """
        Build a record from a standard library ``LogRecord``.

        The source class comes from a ``source_class`` extra; without it
        the logger name is shown. The source method is the calling
        function as found by ``logging``.
        """
        function = record.funcName
        if function == UNKNOWN_FUNCTION:
            function = None

        error = None
        if record.exc_info and record.exc_info[1] is not None:
            error = record.exc_info[1]

        return cls(
            timestamp_ms=int(record.created) * 1000 + int(record.msecs),
            thread_id=record.thread or 0,
            level=record.levelname,
            source_class_name=getattr(record, "source_class", None),
            source_method_name=function,
            logger_name=record.name,
            message=resolve_message(record),
            error=error,
            stack_info=record.stack_info,
        )


def resolve_message(record: logging.LogRecord) -> Optional[str]:
    """
    Return the record's message with its arguments merged in.

    When the message cannot be built, the unformatted message is returned
    instead, or its default repr when even that fails.
    """
    if record.msg is None:
        return None
    try:
        return record.getMessage()
    except Exception:
        pass
    try:
        return str(record.msg)
    except Exception:
        return object.__repr__(record.msg)
