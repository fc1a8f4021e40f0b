"""
Line scanning for the ``Logger.write`` sink adapter.
"""

from __future__ import annotations

from typing import Iterator

from .exceptions import LineTooLongError

# Longest line accepted by ``scan_lines``, newline excluded.
MAX_LINE_SIZE = 64 * 1024


def scan_lines(data: bytes | str, max_line_size: int = MAX_LINE_SIZE) -> Iterator[str]:
    """Yield the lines of ``data`` without their terminators.

    Lines end at ``\\n``; one trailing ``\\r`` is dropped. A final remainder
    without a newline is yielded as a line of its own. Bytes are decoded as
    UTF-8, invalid sequences replaced.

    Raises ``LineTooLongError`` upon reaching a line longer than
    ``max_line_size`` bytes. Lines before it have already been yielded.
    """
    if isinstance(data, str):
        data = data.encode("utf-8", errors="replace")

    lines = data.split(b"\n")
    if lines[-1] == b"":
        # Either empty input or a newline-terminated last line.
        lines.pop()

    for line in lines:
        if line.endswith(b"\r"):
            line = line[:-1]
        if len(line) > max_line_size:
            raise LineTooLongError(length=len(line), limit=max_line_size)
        yield line.decode("utf-8", errors="replace")
