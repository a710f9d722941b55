import os

import pytest

from support_log_formatter.config import ENV_PREFIX, FormatterSettings, get_settings
from support_log_formatter.formatting import StackFrame


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    # Formatter settings come from the environment; start every test clean
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Default formatter settings."""
    return FormatterSettings()


@pytest.fixture
def thrower_frame():
    return StackFrame("some.other.pkg.Thrower", "buggy", "Thrower.java", 123)


@pytest.fixture
def catcher_frame():
    return StackFrame("some.pkg.Catcher", "robust", "Catcher.java", 456)
