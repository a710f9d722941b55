"""
Rendering of an error together with its causes and suppressed errors.

The rendered chain puts the root cause first. Each error that was caused
by the one above it is introduced with ``Caused: ``, suppressed errors are
introduced with ``Also:   `` and indented by one tab. Stack frames shared
with the calling error are left out, and a chain that loops back on itself
ends with a ``<cycle to ...>`` marker instead of recursing forever.

Python exceptions are converted with ``ErrorInfo.from_exception``:
``__cause__`` (or an unsuppressed ``__context__``) becomes the cause and the
members of an exception group become suppressed errors.
"""

import os
import sys
import traceback
from types import TracebackType
from typing import (
    Callable,
    Dict,
    List,
    NamedTuple,
    Optional,
    Protocol,
    Sequence,
    Set,
    TextIO,
    Union,
    runtime_checkable,
)

from support_log_formatter.config import FormatterSettings
from support_log_formatter.errors import ChainRenderError
from support_log_formatter.formatting.transform import LINE_SEPARATOR, MessageTransformer

NO_DETAILS = "No Exception details"

_PLAIN_MODULES = ("builtins", "__main__")


class StackFrame(NamedTuple):
    """One call site captured in a stack trace."""

    scope: str
    function: str
    file_name: Optional[str] = None
    line_number: Optional[int] = None

    def __str__(self) -> str:
        if self.file_name is None:
            location = "Unknown Source"
        elif self.line_number is not None and self.line_number >= 0:
            location = f"{self.file_name}:{self.line_number}"
        else:
            location = self.file_name
        return f"{self.scope}.{self.function}({location})"


@runtime_checkable
class SupportsCustomTrace(Protocol):
    """Exceptions implementing this render their own trace."""

    def format_support_trace(self) -> str: ...


class ErrorInfo:
    """
    An error as seen by the chain renderer.

    Instances are compared by identity, so two errors with the same summary
    and frames are still distinct nodes of a chain.

    Attributes:
        summary: One line description, usually ``Type: message``
        frames: Stack frames, innermost call first
        cause: The error that caused this one, if any
        suppressed: Errors recorded alongside this one
        trace_hook: Optional callable returning a complete custom trace
    """

    def __init__(
        self,
        summary: str,
        frames: Optional[Sequence[StackFrame]] = None,
        cause: Optional["ErrorInfo"] = None,
        suppressed: Optional[List["ErrorInfo"]] = None,
        trace_hook: Optional[Callable[[], str]] = None,
    ):
        self.summary = summary
        self.frames = tuple(frames or ())
        self.cause = cause
        self.suppressed = list(suppressed or [])
        self.trace_hook = trace_hook

    def custom_trace(self) -> Optional[str]:
        """
        Return a custom rendering of this error, or None to use the default.

        Subclasses may override this instead of passing ``trace_hook``.
        """
        if self.trace_hook is None:
            return None
        return self.trace_hook()

    def __str__(self) -> str:
        return self.summary

    def __repr__(self) -> str:
        return f"ErrorInfo({self.summary!r}, frames={len(self.frames)})"

    @classmethod
    def from_exception(
        cls, exc: BaseException, _memo: Optional[Dict[int, "ErrorInfo"]] = None
    ) -> "ErrorInfo":
        """
        Convert a Python exception and everything it links to.

        Exceptions reachable more than once map to the same ErrorInfo, so
        cycles between exceptions survive the conversion.

        Args:
            exc: The exception to convert

        Returns:
            The ErrorInfo for ``exc``
        """
        memo = {} if _memo is None else _memo
        key = id(exc)
        if key in memo:
            return memo[key]

        info = cls(exception_summary(exc), frames=extract_frames(exc.__traceback__))
        if isinstance(exc, SupportsCustomTrace):
            info.trace_hook = exc.format_support_trace
        memo[key] = info

        cause = exc.__cause__
        if cause is None and not exc.__suppress_context__:
            cause = exc.__context__
        if cause is not None:
            info.cause = cls.from_exception(cause, memo)
        if isinstance(exc, BaseExceptionGroup):
            info.suppressed = [cls.from_exception(e, memo) for e in exc.exceptions]
        return info


def exception_summary(exc: BaseException) -> str:
    """Return ``Type: message`` for an exception, or just the type name."""
    exc_type = type(exc)
    name = exc_type.__qualname__
    if exc_type.__module__ not in _PLAIN_MODULES:
        name = f"{exc_type.__module__}.{name}"
    message = str(exc)
    return f"{name}: {message}" if message else name


def extract_frames(tb: Optional[TracebackType]) -> List[StackFrame]:
    """Capture the frames of a traceback, innermost call first."""
    frames = [
        StackFrame(
            frame.f_globals.get("__name__", "?"),
            frame.f_code.co_qualname,
            os.path.basename(frame.f_code.co_filename),
            lineno,
        )
        for frame, lineno in traceback.walk_tb(tb)
    ]
    frames.reverse()
    return frames


class ChainRenderer:
    """
    Render an error chain into text.

    Args:
        transformer: Transformer applied to every summary and custom trace
        settings: Settings for a new transformer when none is given
    """

    def __init__(
        self,
        transformer: Optional[MessageTransformer] = None,
        settings: Optional[FormatterSettings] = None,
    ):
        self.transformer = transformer or MessageTransformer(settings)

    def render(self, error: Union[ErrorInfo, BaseException, None]) -> str:
        """
        Render ``error`` with its causes and suppressed errors.

        Args:
            error: The error to render; exceptions are converted first

        Returns:
            The rendered chain, one line per summary or frame

        Raises:
            ChainRenderError: If a custom trace hook fails
        """
        if error is None:
            return NO_DETAILS
        if isinstance(error, BaseException):
            error = ErrorInfo.from_exception(error)

        buffer: List[str] = []
        self._render_into(buffer, error, None, "", set())
        return "".join(buffer)

    def _render_into(
        self,
        buffer: List[str],
        error: ErrorInfo,
        higher: Optional[ErrorInfo],
        prefix: str,
        seen: Set[int],
    ) -> None:
        transform = self.transformer.transform
        if id(error) in seen:
            buffer.append("<cycle to " + transform(error.summary, prefix) + ">\n")
            return
        seen.add(id(error))

        trace = self._custom_trace(error)
        if trace is not None:
            buffer.append(transform(trace, prefix))
            return

        cause = error.cause
        if cause is not None:
            self._render_into(buffer, cause, error, prefix, seen)
        for suppressed in error.suppressed:
            buffer.append(prefix + "Also:   ")
            self._render_into(buffer, suppressed, error, prefix + "\t", seen)
        if cause is not None:
            buffer.append(prefix + "Caused: ")

        summary = transform(error.summary, "")
        if cause is not None:
            # Only the exact "Type: msg: CauseType: cause msg" form is stripped
            suffix = ": " + transform(cause.summary, prefix)
            if summary.endswith(suffix):
                summary = summary[: -len(suffix)]
        buffer.append(summary + LINE_SEPARATOR)

        higher_frames = higher.frames if higher is not None else ()
        end = unshared_frame_count(error.frames, higher_frames)
        for frame in error.frames[:end]:
            buffer.append(f"{prefix}\tat {frame}{LINE_SEPARATOR}")

    @staticmethod
    def _custom_trace(error: ErrorInfo) -> Optional[str]:
        try:
            trace = error.custom_trace()
        except Exception as e:
            raise ChainRenderError(
                message=f"Custom trace of {error.summary!r} failed: {e}",
                error_summary=error.summary,
            ) from e
        if trace is not None and not isinstance(trace, str):
            raise ChainRenderError(
                message=f"Custom trace of {error.summary!r} is not a string",
                error_summary=error.summary,
            )
        return trace


def unshared_frame_count(
    frames: Sequence[StackFrame], higher_frames: Sequence[StackFrame]
) -> int:
    """
    Count the leading frames of ``frames`` not shared with ``higher_frames``.

    Frames are compared from the end backward; the first mismatch stops
    the cut.
    """
    end = len(frames)
    offset = len(higher_frames) - len(frames)
    while end > 0:
        higher_end = end + offset
        if higher_end <= 0 or higher_frames[higher_end - 1] != frames[end - 1]:
            break
        end -= 1
    return end


def format_error_chain(
    error: Union[ErrorInfo, BaseException, None],
    settings: Optional[FormatterSettings] = None,
) -> str:
    """Render ``error`` with a renderer built from ``settings``."""
    return ChainRenderer(settings=settings).render(error)


def print_error_chain(
    error: Union[ErrorInfo, BaseException, None],
    file: Optional[TextIO] = None,
    settings: Optional[FormatterSettings] = None,
) -> None:
    """
    Write the rendered chain to ``file`` (default: ``sys.stderr``).

    Trailing whitespace is trimmed and a single newline written instead.
    """
    if file is None:
        file = sys.stderr
    print(format_error_chain(error, settings).rstrip(), file=file)
