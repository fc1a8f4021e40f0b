"""
Leveled logging for Klio commands.

Every line is decorated with control sequences interpreted by Klio
(https://github.com/g2a-com/klio): an encoded header carrying level, tags and
mode, followed by the message and a reset sequence. Messages are never
filtered or modified besides that.
"""

from .core import (
    Logger,
    MutableLogger,
    debug,
    debugf,
    error,
    error_logger,
    errorf,
    fatal,
    fatalf,
    info,
    infof,
    new,
    new_mutable,
    reset_global_loggers,
    spam,
    spamf,
    standard_logger,
    verbose,
    verbosef,
    warn,
    warnf,
)
from .exceptions import InvalidLevelError, InvalidModeError, KlioLoggerError, LineTooLongError
from .formatters import RESET_SEQUENCE
from .interceptors import KlioHandler, intercept_std_logging
from .levels import DEFAULT_LEVEL, DEFAULT_MODE, Level, Mode, parse_level, parse_mode

__all__ = [
    "DEFAULT_LEVEL",
    "DEFAULT_MODE",
    "RESET_SEQUENCE",
    "InvalidLevelError",
    "InvalidModeError",
    "KlioHandler",
    "KlioLoggerError",
    "Level",
    "LineTooLongError",
    "Logger",
    "Mode",
    "MutableLogger",
    "debug",
    "debugf",
    "error",
    "error_logger",
    "errorf",
    "fatal",
    "fatalf",
    "info",
    "infof",
    "intercept_std_logging",
    "new",
    "new_mutable",
    "parse_level",
    "parse_mode",
    "reset_global_loggers",
    "spam",
    "spamf",
    "standard_logger",
    "verbose",
    "verbosef",
    "warn",
    "warnf",
]
