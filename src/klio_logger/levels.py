"""
Level and mode enumerations.

Levels are metadata attached to every line; nothing in klio_logger compares or
filters by them. The ordering below only mirrors conventional severity.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from .exceptions import InvalidLevelError, InvalidModeError

# Numeric levels for the stdlib bridge. Python has no native equivalents.
VERBOSE = 15
SPAM = 5


class Level(str, Enum):
    """Severity of a log line."""

    FATAL = "fatal"  # Errors causing a command to exit immediately
    ERROR = "error"  # Errors which cause a command to fail, but not immediately
    WARN = "warn"  # Unexpected situations and minor errors
    INFO = "info"  # Generally useful information
    VERBOSE = "verbose"  # More granular but still useful information
    DEBUG = "debug"  # Information helpful for command developers
    SPAM = "spam"  # Everything

    def to_stdlib_level(self) -> int:
        """Convert to a standard library logging level."""
        return _STDLIB_LEVELS[self]

    @classmethod
    def from_stdlib_level(cls, levelno: int) -> Level:
        """Map a standard library logging level to the closest ``Level``.

        Values between two known levels round down to the less severe one.
        """
        for threshold, level in _STDLIB_THRESHOLDS:
            if levelno >= threshold:
                return level
        return cls.SPAM


class Mode(str, Enum):
    """Rendering hint for the log consumer."""

    LINE = "line"  # Decorate the line according to consumer configuration
    RAW = "raw"  # Leave the line without any decoration


DEFAULT_LEVEL = Level.INFO
DEFAULT_MODE = Mode.LINE

_LEVELS = {level.value: level for level in Level}
_MODES = {mode.value: mode for mode in Mode}

_STDLIB_LEVELS = {
    Level.FATAL: logging.CRITICAL,
    Level.ERROR: logging.ERROR,
    Level.WARN: logging.WARNING,
    Level.INFO: logging.INFO,
    Level.VERBOSE: VERBOSE,
    Level.DEBUG: logging.DEBUG,
    Level.SPAM: SPAM,
}

_STDLIB_THRESHOLDS = sorted(
    ((levelno, level) for level, levelno in _STDLIB_LEVELS.items()),
    key=lambda item: item[0],
    reverse=True,
)


def parse_level(name: str) -> tuple[Level, bool]:
    """Convert a level name to ``Level``, ignoring case.

    Unknown names yield ``(DEFAULT_LEVEL, False)`` so callers can proceed
    without branching on the flag.
    """
    if isinstance(name, Level):
        return name, True
    level = _LEVELS.get(str(name).lower())
    if level is None:
        return DEFAULT_LEVEL, False
    return level, True


def parse_mode(name: str) -> tuple[Mode, bool]:
    """Convert a mode name to ``Mode``, ignoring case. See ``parse_level``."""
    if isinstance(name, Mode):
        return name, True
    mode = _MODES.get(str(name).lower())
    if mode is None:
        return DEFAULT_MODE, False
    return mode, True


def coerce_level(value: Any) -> Level:
    """Return ``value`` as a ``Level``, accepting members or their exact string values."""
    if isinstance(value, Level):
        return value
    level = _LEVELS.get(value) if isinstance(value, str) else None
    if level is None:
        raise InvalidLevelError(value)
    return level


def coerce_mode(value: Any) -> Mode:
    """Return ``value`` as a ``Mode``, accepting members or their exact string values."""
    if isinstance(value, Mode):
        return value
    mode = _MODES.get(value) if isinstance(value, str) else None
    if mode is None:
        raise InvalidModeError(value)
    return mode
