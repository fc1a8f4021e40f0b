"""
Logger Configuration.

Environment variables (prefix ``KLIO_LOGGER_``) seed the global loggers and
control the library's own diagnostics output.
"""

from enum import Enum
from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .levels import DEFAULT_LEVEL, DEFAULT_MODE, Level, Mode, parse_level, parse_mode


class DiagnosticsLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class DiagnosticsFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class LoggerSettings(BaseSettings):
    """Global logger and diagnostics configuration."""

    model_config = SettingsConfigDict(
        env_prefix="KLIO_LOGGER_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    level: Level = Field(default=DEFAULT_LEVEL, description="Initial level of the standard logger")
    tags: str = Field(default="", description="Comma-separated tags of both global loggers")
    mode: Mode = Field(default=DEFAULT_MODE, description="Initial mode of both global loggers")
    diagnostics_level: DiagnosticsLevel = Field(
        default=DiagnosticsLevel.WARNING,
        description="Threshold for klio_logger's own diagnostic events",
    )
    diagnostics_format: DiagnosticsFormat = Field(
        default=DiagnosticsFormat.CONSOLE,
        description="Diagnostic output format (console, json)",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> Level:
        """Unknown level names degrade to the default level."""
        level, _ = parse_level(v)
        return level

    @field_validator("mode", mode="before")
    @classmethod
    def validate_mode(cls, v: Any) -> Mode:
        """Unknown mode names degrade to the default mode."""
        mode, _ = parse_mode(v)
        return mode

    @field_validator("diagnostics_level", mode="before")
    @classmethod
    def validate_diagnostics_level(cls, v: Any) -> DiagnosticsLevel:
        """Unknown thresholds degrade to WARNING."""
        try:
            return DiagnosticsLevel(str(v.value if isinstance(v, Enum) else v).upper())
        except ValueError:
            return DiagnosticsLevel.WARNING

    @field_validator("diagnostics_format", mode="before")
    @classmethod
    def validate_diagnostics_format(cls, v: Any) -> DiagnosticsFormat:
        """Unknown formats degrade to console."""
        try:
            return DiagnosticsFormat(str(v.value if isinstance(v, Enum) else v).lower())
        except ValueError:
            return DiagnosticsFormat.CONSOLE

    @property
    def tag_list(self) -> list[str]:
        """Tags split on commas, blanks dropped, order preserved."""
        return [tag.strip() for tag in self.tags.split(",") if tag.strip()]


@lru_cache(maxsize=1)
def get_settings() -> LoggerSettings:
    """Return the process-wide settings. Call ``get_settings.cache_clear()`` to reload."""
    return LoggerSettings()
