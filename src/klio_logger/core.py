"""
Core logger types and the global loggers.

``Logger`` is immutable: every ``with_*`` method returns a new instance.
``MutableLogger`` adds in-place setters and backs the two global loggers
returned by ``standard_logger()`` and ``error_logger()``.
"""

from __future__ import annotations

import sys
from typing import Any, Mapping, Sequence

from .config import get_settings
from .diagnostics import get_logger
from .formatters import format_line, format_line_prefix
from .io import scan_lines
from .levels import DEFAULT_LEVEL, DEFAULT_MODE, Level, Mode, coerce_level, coerce_mode
from .sinks import Sink, write_line

# =============================================================================
# Logger
# =============================================================================


class Logger:
    """Writes lines decorated with Klio control sequences.

    Level, tags and mode are encoded in a header cached in ``line_prefix``.
    It is rebuilt whenever one of them changes, never when the output does.

    A Logger is itself a sink (see ``write``), so it can be handed to code
    expecting a writable stream.
    """

    def __init__(self, output: Sink) -> None:
        self._output = output
        self._level: Level = DEFAULT_LEVEL
        self._tags: tuple[str, ...] = ()
        self._mode: Mode = DEFAULT_MODE
        self._line_prefix = ""
        self._update_line_prefix()

    def _update_line_prefix(self) -> None:
        self._line_prefix = format_line_prefix(self._level, self._tags, self._mode)

    def _derive(self) -> Logger:
        # Copy-then-override; always an immutable Logger, even from a MutableLogger.
        derived = Logger.__new__(Logger)
        derived._output = self._output
        derived._level = self._level
        derived._tags = self._tags
        derived._mode = self._mode
        derived._line_prefix = self._line_prefix
        return derived

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(level={self._level.value!r}, tags={list(self._tags)!r}, "
            f"mode={self._mode.value!r}, output={self._output!r})"
        )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def level(self) -> Level:
        return self._level

    @property
    def tags(self) -> list[str]:
        """Copy of the tags; mutating it does not affect the logger."""
        return list(self._tags)

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def output(self) -> Sink:
        return self._output

    @property
    def line_prefix(self) -> str:
        return self._line_prefix

    # -------------------------------------------------------------------------
    # Derivation
    # -------------------------------------------------------------------------

    def with_level(self, level: Level | str) -> Logger:
        """Return a new logger logging at ``level``."""
        derived = self._derive()
        derived._level = coerce_level(level)
        derived._update_line_prefix()
        return derived

    def with_tags(self, *tags: str) -> Logger:
        """Return a new logger decorating each line with ``tags``, in order."""
        derived = self._derive()
        derived._tags = tuple(str(tag) for tag in tags)
        derived._update_line_prefix()
        return derived

    def with_mode(self, mode: Mode | str) -> Logger:
        """Return a new logger logging with ``mode``."""
        derived = self._derive()
        derived._mode = coerce_mode(mode)
        derived._update_line_prefix()
        return derived

    def with_output(self, output: Sink) -> Logger:
        """Return a new logger writing to ``output``."""
        derived = self._derive()
        derived._output = output
        return derived

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def print(self, *args: Any) -> Logger:
        """Write one line made of ``args`` joined by spaces.

        Failures of the underlying sink are discarded so logging never breaks
        the caller. Returns ``self`` for chaining.
        """
        line = format_line(self._line_prefix, " ".join(str(arg) for arg in args))
        try:
            write_line(self._output, line)
        except Exception as exc:
            get_logger(__name__).debug(
                "sink_write_failed",
                sink=repr(self._output),
                error=str(exc),
                error_type=type(exc).__name__,
            )
        return self

    def printf(self, fmt: str, *args: Any) -> Logger:
        """Write one line made of ``fmt % args``.

        A single mapping argument fills named placeholders, as with ``%``.
        Arguments not matching ``fmt`` never raise: the line is written as
        ``fmt`` followed by the repr of each argument.
        """
        if not args:
            return self.print(fmt)
        values = args[0] if len(args) == 1 and isinstance(args[0], Mapping) else args
        try:
            text = fmt % values
        except (TypeError, ValueError, KeyError) as exc:
            get_logger(__name__).debug(
                "printf_format_failed",
                fmt=fmt,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return self.print(fmt, *(repr(arg) for arg in args))
        return self.print(text)

    def write(self, data: bytes | str) -> int:
        """Write every line of ``data`` as a separately decorated log line.

        Returns ``len(data)``. Raises ``LineTooLongError`` for an oversized
        line, after the lines preceding it have been written.

        A write of exactly one newline emits nothing. ``print(x, file=logger)``
        writes ``x`` and the line end separately, and the line end alone must
        not become an empty log line. Multiple arguments to ``print`` are still
        written piecewise, one decorated line per piece.
        """
        if data in ("\n", b"\n"):
            return len(data)
        for line in scan_lines(data):
            self.print(line)
        return len(data)

    def flush(self) -> None:
        """Lines are written immediately, nothing to flush."""


def new(output: Sink) -> Logger:
    """Create a logger with the default level, no tags and the default mode."""
    return Logger(output)


# =============================================================================
# MutableLogger
# =============================================================================


class MutableLogger(Logger):
    """A ``Logger`` that can also be changed in place.

    Every holder of a reference observes changes immediately. There is no
    locking; callers serialize concurrent setters themselves.
    """

    def set_level(self, level: Level | str) -> None:
        self._level = coerce_level(level)
        self._update_line_prefix()

    def set_tags(self, *tags: str) -> None:
        self._tags = tuple(str(tag) for tag in tags)
        self._update_line_prefix()

    def set_mode(self, mode: Mode | str) -> None:
        self._mode = coerce_mode(mode)
        self._update_line_prefix()

    def set_output(self, output: Sink) -> None:
        self._output = output


def new_mutable(output: Sink) -> MutableLogger:
    """Create a mutable logger with the default level, no tags and the default mode."""
    return MutableLogger(output)


# =============================================================================
# Global State
# =============================================================================

_standard_logger: MutableLogger | None = None
_error_logger: MutableLogger | None = None


def _configured(output: Sink, level: Level | None = None) -> MutableLogger:
    settings = get_settings()
    logger = MutableLogger(output)
    logger.set_level(level or settings.level)
    logger.set_tags(*settings.tag_list)
    logger.set_mode(settings.mode)
    return logger


def standard_logger() -> MutableLogger:
    """Return the global logger for non-error logs.

    Created on first call, writing to ``sys.stdout`` at the level from
    ``KLIO_LOGGER_LEVEL`` ("info" unless set). Later calls return the same
    instance.
    """
    global _standard_logger
    if _standard_logger is None:
        _standard_logger = _configured(sys.stdout)
    return _standard_logger


def error_logger() -> MutableLogger:
    """Return the global logger for error logs.

    Created on first call, writing to ``sys.stderr`` at the "error" level.
    Later calls return the same instance.
    """
    global _error_logger
    if _error_logger is None:
        _error_logger = _configured(sys.stderr, Level.ERROR)
    return _error_logger


def reset_global_loggers() -> None:
    """Drop both global loggers; the next accessor call recreates them."""
    global _standard_logger, _error_logger
    _standard_logger = None
    _error_logger = None


# =============================================================================
# Level Functions (standard logger)
# =============================================================================


def _print_at(level: Level, args: Sequence[Any]) -> None:
    standard_logger().with_level(level).print(*args)


def _printf_at(level: Level, fmt: str, args: Sequence[Any]) -> None:
    standard_logger().with_level(level).printf(fmt, *args)


def fatal(*args: Any) -> None:
    """Write a line at the fatal level. Does not exit the process."""
    _print_at(Level.FATAL, args)


def error(*args: Any) -> None:
    _print_at(Level.ERROR, args)


def warn(*args: Any) -> None:
    _print_at(Level.WARN, args)


def info(*args: Any) -> None:
    _print_at(Level.INFO, args)


def verbose(*args: Any) -> None:
    _print_at(Level.VERBOSE, args)


def debug(*args: Any) -> None:
    _print_at(Level.DEBUG, args)


def spam(*args: Any) -> None:
    _print_at(Level.SPAM, args)


def fatalf(fmt: str, *args: Any) -> None:
    """Write a ``%``-formatted line at the fatal level. Does not exit the process."""
    _printf_at(Level.FATAL, fmt, args)


def errorf(fmt: str, *args: Any) -> None:
    _printf_at(Level.ERROR, fmt, args)


def warnf(fmt: str, *args: Any) -> None:
    _printf_at(Level.WARN, fmt, args)


def infof(fmt: str, *args: Any) -> None:
    _printf_at(Level.INFO, fmt, args)


def verbosef(fmt: str, *args: Any) -> None:
    _printf_at(Level.VERBOSE, fmt, args)


def debugf(fmt: str, *args: Any) -> None:
    _printf_at(Level.DEBUG, fmt, args)


def spamf(fmt: str, *args: Any) -> None:
    _printf_at(Level.SPAM, fmt, args)
