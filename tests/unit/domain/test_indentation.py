import unittest

from layout_guard.domain.constants import SPACE_UNIT
from layout_guard.domain.entities import Position, TextRange
from layout_guard.domain.indentation import IndentationModel
from layout_guard.domain.source_text import SourceText


class TestIndentationDepth(unittest.TestCase):
    def test_tabs_count_one_unit_each(self) -> None:
        self.assertEqual(IndentationModel.depth("\t\t"), 2)

    def test_four_spaces_count_one_unit(self) -> None:
        self.assertEqual(IndentationModel.depth("        "), 2)

    def test_mixed_tabs_and_spaces(self) -> None:
        self.assertEqual(IndentationModel.depth("\t    "), 2)

    def test_leftover_spaces_are_truncated(self) -> None:
        self.assertEqual(IndentationModel.depth("  "), 0)
        self.assertEqual(IndentationModel.depth("      "), 1)

    def test_empty_indent_is_depth_zero(self) -> None:
        self.assertEqual(IndentationModel.depth(""), 0)


class TestIndentationModel(unittest.TestCase):
    def setUp(self) -> None:
        self.source = SourceText("start\n\tone\n        two\n\n  odd")

    def test_line_indent_returns_literal_whitespace(self) -> None:
        model = IndentationModel(self.source)
        self.assertEqual(model.line_indent(1), "")
        self.assertEqual(model.line_indent(2), "\t")
        self.assertEqual(model.line_indent(3), "        ")
        self.assertEqual(model.line_indent(4), "")

    def test_line_depth(self) -> None:
        model = IndentationModel(self.source)
        self.assertEqual(model.line_depth(3), 2)
        self.assertEqual(model.line_depth(5), 0)

    def test_expected_indent_uses_configured_unit(self) -> None:
        self.assertEqual(IndentationModel(self.source).expected_indent(2), "\t\t")
        self.assertEqual(
            IndentationModel(self.source, SPACE_UNIT).expected_indent(2), " " * 8)

    def test_expected_indent_never_negative(self) -> None:
        self.assertEqual(IndentationModel(self.source).expected_indent(-1), "")

    def test_indent_range_covers_leading_whitespace_only(self) -> None:
        model = IndentationModel(self.source)
        self.assertEqual(model.indent_range(2), TextRange(6, 7))
        self.assertEqual(model.indent_range(1), TextRange(0, 0))


class TestSourceText(unittest.TestCase):
    def test_position_at_maps_offsets_to_line_and_column(self) -> None:
        source = SourceText("ab\ncd\n")
        self.assertEqual(source.position_at(0), Position(1, 0))
        self.assertEqual(source.position_at(4), Position(2, 1))
        self.assertEqual(source.position_at(6), Position(3, 0))

    def test_line_count_includes_trailing_empty_line(self) -> None:
        self.assertEqual(SourceText("a\nb\n").line_count, 3)

    def test_char_offset_is_identity_for_ascii(self) -> None:
        self.assertEqual(SourceText("abc").char_offset(2), 2)

    def test_char_offset_translates_multibyte_characters(self) -> None:
        source = SourceText('s = "é"; t')
        # 'é' is two bytes in UTF-8, so byte 10 is character 9 ('t').
        self.assertEqual(source.char_offset(10), 9)
        self.assertEqual(source.slice(9, 10), "t")

    def test_newline_follows_the_file(self) -> None:
        self.assertEqual(SourceText("a\r\nb\r\n").newline, "\r\n")
        self.assertEqual(SourceText("a\nb\n").newline, "\n")
        self.assertEqual(SourceText("a").newline, "\n")
