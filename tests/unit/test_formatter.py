"""
Unit tests for the record formatter.

Covers:
- Complete formatted records (message, error, no message)
- Timestamp formatting
- Source location fallbacks and abbreviation
- Best-effort rendering when the error chain fails
"""
import logging
import os
from concurrent.futures import ThreadPoolExecutor

import pytest

from support_log_formatter.formatting import (
    ErrorInfo,
    RecordFormatter,
    SupportLogRecord,
    format_timestamp,
)

SEP = os.linesep

PREFIX = "1970-01-01 00:00:00.000+0000 [id=999]"


@pytest.fixture
def formatter(settings):
    return RecordFormatter(settings)


@pytest.fixture
def phony_error(thrower_frame, catcher_frame):
    return ErrorInfo("PhonyException: oops", [thrower_frame, catcher_frame])


def make_record(**kwargs):
    values = {
        "timestamp_ms": 0,
        "thread_id": 999,
        "level": "INFO",
        "source_class_name": "some.pkg.Catcher",
        "source_method_name": "robust",
        "message": "some message",
    }
    values.update(kwargs)
    return SupportLogRecord(**values)


def test_smokes(formatter):
    assert formatter.format(make_record()) == (
        PREFIX + "\tINFO\tsome.pkg.Catcher#robust: some message\n"
    )


def test_record_with_error(formatter, phony_error):
    record = make_record(level="WARNING", message="failed to do stuff", error=phony_error)
    assert formatter.format(record) == (
        PREFIX + "\tWARNING\tsome.pkg.Catcher#robust: failed to do stuff\n"
        + "PhonyException: oops" + SEP
        + "\tat some.other.pkg.Thrower.buggy(Thrower.java:123)" + SEP
        + "\tat some.pkg.Catcher.robust(Catcher.java:456)" + SEP
    )


def test_record_with_error_and_no_message(formatter, phony_error):
    record = make_record(level="WARNING", message=None, error=phony_error)
    assert formatter.format(record).startswith(
        PREFIX + "\tWARNING\tsome.pkg.Catcher#robust\nPhonyException: oops" + SEP
    )


def test_message_line_breaks_are_marked(formatter):
    output = formatter.format(make_record(message="foo\nbar"))
    assert output == PREFIX + "\tINFO\tsome.pkg.Catcher#robust: foo" + SEP + "[LF]> bar\n"


def test_record_with_python_exception(formatter):
    try:
        raise ValueError("oops")
    except ValueError as exc:
        output = formatter.format(make_record(error=exc))

    lines = output.splitlines()
    assert lines[1] == "ValueError: oops"
    assert lines[2].startswith("\tat ")
    assert "test_record_with_python_exception" in lines[2]


def test_source_without_method(formatter):
    output = formatter.format(make_record(source_method_name=None))
    assert output == PREFIX + "\tINFO\tsome.pkg.Catcher: some message\n"


def test_source_falls_back_to_logger_name(formatter):
    record = make_record(source_class_name=None, logger_name="app.jobs")
    assert "\tINFO\tapp.jobs#robust: " in formatter.format(record)


def test_source_without_any_name(formatter):
    record = make_record(source_class_name=None, source_method_name=None)
    assert formatter.format(record) == PREFIX + "\tINFO\t-: some message\n"


def test_long_source_is_abbreviated(formatter):
    record = make_record(source_class_name="org.example.deeply.nested.package.ClassName")
    assert "\to.e.d.nested.package.ClassName#robust: " in formatter.format(record)


def test_long_source_without_method_uses_wider_column(formatter):
    name = "org.example.deeply.nested.package.ClassName"
    record = make_record(source_class_name=name, source_method_name=None)
    assert "\to.e.deeply.nested.package.ClassName: " in formatter.format(record)


def test_numeric_level_is_named():
    assert make_record(level=logging.WARNING).level == "WARNING"


def test_failing_error_chain_is_left_out(formatter, caplog):
    def boom():
        raise RuntimeError("hook failed")

    record = make_record(error=ErrorInfo("X: y", trace_hook=boom))
    with caplog.at_level(logging.DEBUG, logger="support_log_formatter"):
        output = formatter.format(record)

    assert output == PREFIX + "\tINFO\tsome.pkg.Catcher#robust: some message\n"
    assert "Error chain left out of log record" in caplog.text


def test_failing_error_chain_uses_given_logger(settings, caplog):
    class Broken(ErrorInfo):
        def custom_trace(self):
            raise RecursionError("too deep")

    logger = logging.getLogger("tests.formatter")
    formatter = RecordFormatter(settings, logger=logger)
    with caplog.at_level(logging.DEBUG, logger="tests.formatter"):
        formatter.format(make_record(error=Broken("Broken: b")))

    assert [r.name for r in caplog.records] == ["tests.formatter"]


def test_disabled_transform_keeps_raw_message():
    from support_log_formatter.config import FormatterSettings

    formatter = RecordFormatter(FormatterSettings(DO_NOT_FORMAT_FOR_CLI=True))
    output = formatter.format(make_record(message="foo\nbar"))
    assert output.endswith("#robust: foo\nbar\n")


@pytest.mark.parametrize(
    "timestamp_ms,expected",
    [
        (0, "1970-01-01 00:00:00.000+0000"),
        (1_700_000_000_123, "2023-11-14 22:13:20.123+0000"),
        (-1, "1969-12-31 23:59:59.999+0000"),
        (10**18, "1000000000000000000"),
        (-(10**18), "-1000000000000000000"),
    ],
)
def test_format_timestamp(timestamp_ms, expected):
    assert format_timestamp(timestamp_ms) == expected


def test_out_of_range_timestamp_is_written_raw(formatter):
    output = formatter.format(make_record(timestamp_ms=10**18, message="x"))
    assert output == "1000000000000000000 [id=999]\tINFO\tsome.pkg.Catcher#robust: x\n"


def test_stack_info_follows_error_chain(formatter, phony_error):
    record = make_record(error=phony_error, stack_info="Stack:\nframe")
    assert formatter.format(record).endswith(
        "\tat some.pkg.Catcher.robust(Catcher.java:456)" + SEP + "Stack:" + SEP + "[LF]> frame\n"
    )


def test_concurrent_formatting_is_consistent(formatter):
    records = [make_record(timestamp_ms=i * 1001, thread_id=i) for i in range(50)]
    expected = [formatter.format(r) for r in records]
    with ThreadPoolExecutor(max_workers=8) as pool:
        assert list(pool.map(formatter.format, records)) == expected
