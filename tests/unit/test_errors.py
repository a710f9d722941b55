"""
Unit tests for the errors module.

Covers:
- Instantiation and attributes of all custom exception classes (parametrized)
- Edge cases for custom messages, codes and details
"""
import pytest

from support_log_formatter.errors import ChainRenderError, ConfigurationError, FormatterError


@pytest.mark.parametrize(
    "exc_cls,kwargs,expected",
    [
        (
            FormatterError,
            {},
            {"message": "An unexpected formatting error occurred", "code": "FORMATTER_ERROR"},
        ),
        (
            FormatterError,
            {"message": "Custom", "code": "CUSTOM", "details": {"foo": "bar"}},
            {"message": "Custom", "code": "CUSTOM", "details": {"foo": "bar"}},
        ),
        (ConfigurationError, {}, {"code": "CONFIGURATION_ERROR", "fields": []}),
        (
            ConfigurationError,
            {"fields": ["NEWLINE_INDICATOR"]},
            {"details": {"fields": ["NEWLINE_INDICATOR"]}},
        ),
        (ChainRenderError, {}, {"code": "CHAIN_RENDER_ERROR", "error_summary": None}),
        (
            ChainRenderError,
            {"error_summary": "ValueError: oops"},
            {"details": {"error_summary": "ValueError: oops"}},
        ),
    ],
)
def test_exception_attributes(exc_cls, kwargs, expected):
    exc = exc_cls(**kwargs)
    for key, value in expected.items():
        assert getattr(exc, key) == value


@pytest.mark.parametrize("exc_cls", [ConfigurationError, ChainRenderError])
def test_subclasses_are_formatter_errors(exc_cls):
    with pytest.raises(FormatterError):
        raise exc_cls()


def test_message_is_exception_text():
    assert str(ChainRenderError("Could not render")) == "Could not render"


def test_details_default_to_empty_dict():
    assert FormatterError().details == {}
