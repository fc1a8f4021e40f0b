"""
Sink 类型判断单元测试
"""

from __future__ import annotations

import io
import sys

import pytest

from klio_logger.sinks import is_text_sink


class _Duck:
    def __init__(self, **attrs) -> None:
        self.__dict__.update(attrs)

    def write(self, data) -> None:
        pass


class TestIsTextSink:
    """is_text_sink 测试"""

    @pytest.mark.parametrize(
        ("sink", "expected"),
        [
            (io.StringIO(), True),
            (io.BytesIO(), False),
            (_Duck(encoding="utf-8", mode="w"), True),
            (_Duck(encoding="utf-8"), True),
            (_Duck(encoding="utf-8", mode="wb"), False),
            (_Duck(encoding=None), False),
            (_Duck(), False),
        ],
    )
    def test_detection(self, sink, expected: bool) -> None:
        assert is_text_sink(sink) is expected

    def test_standard_streams(self) -> None:
        assert is_text_sink(sys.stdout) is True
        assert is_text_sink(sys.stdout.buffer) is False
