"""
行头编码单元测试

测试 Klio 控制序列行头的字节级格式、标签顺序、空标签编码以及编码失败时的回退。
"""

from __future__ import annotations

from klio_logger.formatters import RESET_SEQUENCE, format_line, format_line_prefix
from klio_logger.levels import Level, Mode


class TestLinePrefix:
    """format_line_prefix 测试"""

    def test_default_prefix_is_byte_exact(self) -> None:
        """默认配置的行头应逐字节匹配"""
        prefix = format_line_prefix(Level.INFO, [], Mode.LINE)
        assert prefix == (
            '\x1b_klio_log_level "info"\x1b\\'
            "\x1b_klio_tags []\x1b\\"
            '\x1b_klio_mode "line"\x1b\\'
        )

    def test_empty_tags_encode_as_empty_array(self, make_header) -> None:
        """空标签编码为 []，而不是 null"""
        prefix = format_line_prefix(Level.DEBUG, (), Mode.RAW)
        assert "null" not in prefix
        assert prefix == make_header("debug", "[]", "raw")

    def test_tags_are_minified_json(self, make_header) -> None:
        prefix = format_line_prefix(Level.WARN, ["build", "x"], Mode.LINE)
        assert prefix == make_header("warn", '["build","x"]', "line")

    def test_tag_order_is_preserved(self) -> None:
        """标签顺序保持原样，不排序也不去重"""
        ba = format_line_prefix(Level.INFO, ["b", "a"], Mode.LINE)
        ab = format_line_prefix(Level.INFO, ["a", "b"], Mode.LINE)
        assert ba != ab
        assert '["b","a"]' in ba
        assert '["a","a"]' in format_line_prefix(Level.INFO, ["a", "a"], Mode.LINE)

    def test_tags_are_json_escaped(self) -> None:
        prefix = format_line_prefix(Level.INFO, ['say "hi"', "back\\slash"], Mode.LINE)
        assert '["say \\"hi\\"","back\\\\slash"]' in prefix

    def test_prefix_is_pure(self) -> None:
        """相同输入产生相同行头"""
        assert format_line_prefix(Level.SPAM, ["t"], Mode.RAW) == format_line_prefix(Level.SPAM, ["t"], Mode.RAW)

    def test_unencodable_tags_fall_back_to_empty_array(self, make_header) -> None:
        """orjson 无法编码的值（孤立代理字符）回退为默认值，不抛异常"""
        prefix = format_line_prefix(Level.ERROR, ["\ud800"], Mode.LINE)
        assert prefix == make_header("error", "[]", "line")


class TestFormatLine:
    """format_line 测试"""

    def test_reset_sequence(self) -> None:
        assert RESET_SEQUENCE == "\x1b_klio_reset\x1b\\"

    def test_line_layout(self) -> None:
        """内容后紧跟重置序列和换行符"""
        assert format_line("PREFIX", "hello") == "PREFIXhello\x1b_klio_reset\x1b\\\n"

    def test_content_is_not_modified(self) -> None:
        text = 'weird "content" \\ with \x1b escapes'
        assert format_line("", text) == text + RESET_SEQUENCE + "\n"
