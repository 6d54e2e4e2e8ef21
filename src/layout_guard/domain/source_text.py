"""SourceText: immutable text of one file with line and offset lookups."""

from bisect import bisect_right

from layout_guard.domain.entities import Position


class SourceText:
    """
    Full text of one file plus its 1-indexed lines.

    Offsets are character offsets. The parser gateway works in UTF-8 bytes,
    so char_offset() translates byte offsets for non-ASCII files.
    """

    def __init__(self, text: str, path: str = "") -> None:
        self._text = text
        self._path = path
        self._lines = text.split("\n")
        self._newline = "\r\n" if "\r\n" in text else "\n"
        self._line_starts: list[int] = [0]
        for line in self._lines[:-1]:
            self._line_starts.append(self._line_starts[-1] + len(line) + 1)
        self._byte_to_char: list[int] | None = None
        if not text.isascii():
            mapping: list[int] = []
            for char_index, char in enumerate(text):
                mapping.extend([char_index] * len(char.encode("utf-8")))
            mapping.append(len(text))
            self._byte_to_char = mapping

    @property
    def text(self) -> str:
        return self._text

    @property
    def path(self) -> str:
        return self._path

    @property
    def newline(self) -> str:
        """Line terminator used when a fix inserts a line break."""
        return self._newline

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line(self, line_number: int) -> str:
        """Return the text of a 1-indexed line without its newline."""
        return self._lines[line_number - 1]

    def line_start(self, line_number: int) -> int:
        """Character offset of the first character of a 1-indexed line."""
        return self._line_starts[line_number - 1]

    def position_at(self, offset: int) -> Position:
        index = bisect_right(self._line_starts, offset) - 1
        return Position(line=index + 1, column=offset - self._line_starts[index])

    def char_offset(self, byte_offset: int) -> int:
        if self._byte_to_char is None:
            return byte_offset
        return self._byte_to_char[byte_offset]

    def slice(self, start: int, end: int) -> str:
        return self._text[start:end]
