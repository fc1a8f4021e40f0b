"""
Interceptors for routing standard library logging through Klio loggers.
"""

from __future__ import annotations

import logging

from .core import Logger, standard_logger
from .levels import Level


class KlioHandler(logging.Handler):
    """
    Forward standard library log records to a klio_logger ``Logger``.

    Each record becomes one line (or one line per message line) at the
    ``Level`` closest to ``record.levelno``. Without an explicit target the
    standard logger is looked up on every record, so later ``set_output``
    or ``set_tags`` calls on it are honoured.
    """

    def __init__(self, target: Logger | None = None, level: int | str = logging.NOTSET) -> None:
        super().__init__(level)
        self._target = target

    @property
    def target(self) -> Logger:
        return self._target if self._target is not None else standard_logger()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            logger = self.target.with_level(Level.from_stdlib_level(record.levelno))
            if "\n" in msg:
                # Tracebacks span several lines; each gets its own header.
                logger.write(msg)
            else:
                logger.print(msg)
        except Exception:
            self.handleError(record)


def intercept_std_logging(
    target: Logger | None = None,
    level: int | str = logging.INFO,
    name: str | None = None,
) -> KlioHandler:
    """Replace the handlers of a stdlib logger with a ``KlioHandler``.

    Args:
        target: Logger receiving the records (default: the standard logger)
        level: Threshold of the reconfigured logger
        name: Name of the logger to reconfigure (default: root)
    """
    handler = KlioHandler(target)
    std_logger = logging.getLogger(name)
    std_logger.handlers = []
    std_logger.setLevel(level)
    std_logger.addHandler(handler)
    return handler
