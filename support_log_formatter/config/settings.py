"""
Settings loading for the support log formatter.

Settings are read once, on first use, and the same instance is returned
afterwards. Call ``get_settings.cache_clear()`` to force a reload.
"""

from functools import lru_cache

from pydantic import ValidationError

from support_log_formatter.errors import ConfigurationError

from .base import FormatterSettings


@lru_cache(maxsize=1)
def get_settings() -> FormatterSettings:
    """
    Get the formatter settings for the current process.

    Returns:
        FormatterSettings: The cached settings instance

    Raises:
        ConfigurationError: If the environment holds invalid values
    """
    try:
        return FormatterSettings()
    except ValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            message=f"Invalid formatter configuration: {e.error_count()} error(s)",
            fields=fields,
        ) from e
