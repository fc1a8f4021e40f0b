"""
Line formatting: the Klio control-sequence header and the reset sequence.

Each line has the shape::

    ESC_klio_log_level "<level>"ESC\\ESC_klio_tags [<tags>]ESC\\ESC_klio_mode "<mode>"ESC\\<content>ESC_klio_resetESC\\<LF>

``ESC_`` opens an Application Program Command and ``ESC\\`` (String Terminator)
closes it. Values are minified JSON.
"""

from __future__ import annotations

from typing import Any, Sequence

import orjson

from .diagnostics import get_logger
from .levels import DEFAULT_LEVEL, DEFAULT_MODE, Level, Mode

ESC = "\x1b"
APC = ESC + "_"
ST = ESC + "\\"

RESET_SEQUENCE = f"{APC}klio_reset{ST}"

_FALLBACK_LEVEL = f'"{DEFAULT_LEVEL.value}"'
_FALLBACK_TAGS = "[]"
_FALLBACK_MODE = f'"{DEFAULT_MODE.value}"'


def orjson_dumps(v: Any, *, default: Any = None) -> str:
    """Fast JSON serialization using orjson."""
    return orjson.dumps(v, default=default).decode()


def _encode(field: str, value: Any, fallback: str) -> str:
    try:
        return orjson_dumps(value)
    except orjson.JSONEncodeError as exc:
        get_logger(__name__).debug("header_encode_fallback", field=field, error=str(exc))
        return fallback


def format_line_prefix(level: Level, tags: Sequence[str], mode: Mode) -> str:
    """Build the header prepended to every line.

    Never raises: a value orjson cannot encode is replaced by the encoding of
    the default for that field.
    """
    return "".join(
        [
            f"{APC}klio_log_level {_encode('level', level.value, _FALLBACK_LEVEL)}{ST}",
            f"{APC}klio_tags {_encode('tags', list(tags), _FALLBACK_TAGS)}{ST}",
            f"{APC}klio_mode {_encode('mode', mode.value, _FALLBACK_MODE)}{ST}",
        ]
    )


def format_line(line_prefix: str, text: str) -> str:
    """Wrap ``text`` with ``line_prefix`` and the reset sequence, newline-terminated."""
    return f"{line_prefix}{text}{RESET_SEQUENCE}\n"
