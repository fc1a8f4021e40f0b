"""
Sink abstraction.

A sink is anything with a ``write`` method. Loggers reference sinks but never
own them: closing a sink is the caller's responsibility.
"""

from __future__ import annotations

import io
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Writable destination for log lines."""

    def write(self, data: Any, /) -> Any: ...


def is_text_sink(sink: Any) -> bool:
    """Whether ``sink`` expects ``str``.

    True for ``io.TextIOBase`` and for wrappers that look like text streams
    (an ``encoding`` attribute and no ``"b"`` in ``mode``), such as colorama's
    ``StreamWrapper``.
    """
    if isinstance(sink, io.TextIOBase):
        return True
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return False
    mode = getattr(sink, "mode", "")
    return isinstance(getattr(sink, "encoding", None), str) and not (isinstance(mode, str) and "b" in mode)


def write_line(sink: Sink, line: str) -> None:
    """Write ``line`` to ``sink`` in a single ``write`` call.

    Text streams receive ``str``; every other sink receives UTF-8 ``bytes``,
    and gets ``str`` instead if it rejects them with ``TypeError``. Other
    errors propagate to the caller.
    """
    if is_text_sink(sink):
        sink.write(line)
    else:
        try:
            sink.write(line.encode("utf-8", errors="replace"))
        except TypeError:
            sink.write(line)

    flush = getattr(sink, "flush", None)
    if flush is not None:
        flush()
