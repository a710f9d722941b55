"""
Line break marking for log message text.

Text written into a log line may contain user supplied line breaks that
would otherwise forge extra log entries. The transformer replaces every
embedded break with a platform line separator followed by a visible label
(``[CRLF]``, ``[LF]`` or ``[CR]``) and the configured newline marker.
A break at the very end of the text is left alone.
"""

import os
from typing import Optional

from support_log_formatter.config import FormatterSettings, get_settings

LINE_SEPARATOR = os.linesep

CRLF = "\r\n"


class MessageTransformer:
    """
    Mark embedded line breaks in arbitrary text.

    Args:
        settings: Optional formatter settings; the process-wide settings
            are used when omitted
    """

    def __init__(self, settings: Optional[FormatterSettings] = None):
        self.settings = settings or get_settings()

    @property
    def enabled(self) -> bool:
        return not self.settings.DO_NOT_FORMAT_FOR_CLI

    @property
    def newline_indicator(self) -> str:
        return self.settings.NEWLINE_INDICATOR

    def transform(self, text: str, indent: str = "") -> str:
        """
        Transform a log message string for console output.

        Args:
            text: The original message text
            indent: Text written before each label, usually the current
                indentation prefix

        Returns:
            The transformed text
        """
        if not self.enabled:
            return text

        parts = []
        length = len(text)
        i = 0
        while i < length:
            c = text[i]
            if text.startswith(CRLF, i):
                if i < length - len(CRLF):
                    parts.append(self._marker(indent, "[CRLF]"))
                else:
                    parts.append(LINE_SEPARATOR)
                i += len(CRLF)
                continue
            if c == "\n" or c == "\r":
                if i < length - 1:
                    parts.append(self._marker(indent, "[LF]" if c == "\n" else "[CR]"))
                else:
                    parts.append(c)
                i += 1
                continue
            parts.append(c)
            i += 1
        return "".join(parts)

    def _marker(self, indent: str, label: str) -> str:
        return LINE_SEPARATOR + indent + label + self.newline_indicator


def transform_message(
    text: str, indent: str = "", settings: Optional[FormatterSettings] = None
) -> str:
    """
    Transform ``text`` with a transformer built from ``settings``.

    Example:
        ```python
        transform_message("foo\\nbar")  # "foo" + os.linesep + "[LF]> bar"
        ```
    """
    return MessageTransformer(settings).transform(text, indent)
