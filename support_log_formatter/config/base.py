"""
Base configuration module for the support log formatter.

This module provides the settings class holding the two process-wide
toggles of the formatter. Values are read from the environment (or a
``.env`` file) using the ``SUPPORT_LOG_FORMATTER_`` prefix.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "SUPPORT_LOG_FORMATTER_"


class FormatterSettings(BaseSettings):
    """
    Settings class for the formatter.

    Attributes:
        DO_NOT_FORMAT_FOR_CLI: Pass message text through verbatim instead of
            marking embedded line breaks
        NEWLINE_INDICATOR: Marker written after every line break label
    """

    DO_NOT_FORMAT_FOR_CLI: bool = Field(
        default=False,
        description="Disable line break marking for post-processed logs",
    )
    NEWLINE_INDICATOR: str = Field(
        default="> ", description="Marker written after every line break label"
    )

    @field_validator("NEWLINE_INDICATOR")
    def validate_newline_indicator(cls, value):
        """
        Reject markers that contain line breaks themselves.
        """
        if "\r" in value or "\n" in value:
            raise ValueError(
                "NEWLINE_INDICATOR must not contain CR or LF characters. "
                f"You provided: {value!r}"
            )
        return value

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX, env_file=".env", case_sensitive=True, extra="ignore"
    )
