"""
Unified exception hierarchy for klio_logger.

Only configuration mistakes (unknown level or mode values) and line-scanning
failures are raised. Sink write failures are never raised; see ``Logger.print``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class KlioLoggerError(Exception):
    """Root of all klio_logger exceptions.

    Carries a stable machine-readable ``code`` and free-form ``details``.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


# ================================
# Validation errors
# ================================


class InvalidLevelError(KlioLoggerError, ValueError):
    """Raised when a value cannot be converted to a ``Level``."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Invalid log level: {value!r}",
            code="INVALID_LEVEL",
            details={"value": value},
        )


class InvalidModeError(KlioLoggerError, ValueError):
    """Raised when a value cannot be converted to a ``Mode``."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Invalid log mode: {value!r}",
            code="INVALID_MODE",
            details={"value": value},
        )


# ================================
# I/O errors
# ================================


class LineTooLongError(KlioLoggerError):
    """A single line passed to ``Logger.write`` exceeds the scanner limit.

    Lines preceding the offending one have already been emitted.
    """

    def __init__(self, *, length: int, limit: int) -> None:
        super().__init__(
            f"Line of {length} bytes exceeds the maximum of {limit} bytes",
            code="LINE_TOO_LONG",
            details={"length": length, "limit": limit},
        )
