"""Line/indentation model: leading whitespace, depth and expected indent strings."""

import re

from layout_guard.domain.constants import SPACES_PER_UNIT, TAB_UNIT
from layout_guard.domain.entities import TextRange
from layout_guard.domain.source_text import SourceText

_LEADING_WHITESPACE = re.compile(r"[ \t]*")
_SPACE_GROUP = " " * SPACES_PER_UNIT


class IndentationModel:
    """
    Maps lines of one SourceText to indentation depths.

    Four consecutive spaces count as one unit, as does each tab. Leftover
    spaces that do not complete a group of four are truncated away.
    """

    def __init__(self, source: SourceText, unit: str = TAB_UNIT) -> None:
        self._source = source
        self._unit = unit

    @property
    def unit(self) -> str:
        return self._unit

    def line_indent(self, line_number: int) -> str:
        """Literal leading whitespace of a 1-indexed line."""
        match = _LEADING_WHITESPACE.match(self._source.line(line_number))
        return match.group(0) if match else ""

    @staticmethod
    def depth(indent: str) -> int:
        return indent.replace(_SPACE_GROUP, TAB_UNIT).count(TAB_UNIT)

    def line_depth(self, line_number: int) -> int:
        return self.depth(self.line_indent(line_number))

    def expected_indent(self, depth: int) -> str:
        return self._unit * max(depth, 0)

    def indent_range(self, line_number: int) -> TextRange:
        """Range of the line's leading whitespace, for whitespace-only fixes."""
        start = self._source.line_start(line_number)
        return TextRange(start, start + len(self.line_indent(line_number)))
