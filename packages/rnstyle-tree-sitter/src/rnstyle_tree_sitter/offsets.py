"""Conversions between character offsets, UTF-8 byte offsets and line/column positions.

tree-sitter reports UTF-8 byte offsets, while editors and Python strings
address text by character. Everything outside the tree query layer works
in character offsets.
"""

from bisect import bisect_right
from itertools import accumulate
from typing import List, Tuple


class OffsetMap:
    def __init__(self, source: str):
        self.source = source
        self.data = source.encode("utf-8")
        self._ascii = len(self.data) == len(source)
        # _char_starts[i] is the byte offset of character i; last entry is len(data)
        self._char_starts: List[int] = []
        if not self._ascii:
            widths = (len(ch.encode("utf-8")) for ch in source)
            self._char_starts = [0, *accumulate(widths)]
        self._line_starts = [0] + [i + 1 for i, ch in enumerate(source) if ch == "\n"]

    def char_to_byte(self, offset: int) -> int:
        if not 0 <= offset <= len(self.source):
            raise IndexError(f"offset {offset} outside document of length {len(self.source)}")
        if self._ascii:
            return offset
        return self._char_starts[offset]

    def byte_to_char(self, byte_offset: int) -> int:
        if not 0 <= byte_offset <= len(self.data):
            raise IndexError(f"byte offset {byte_offset} outside document of {len(self.data)} bytes")
        if self._ascii:
            return byte_offset
        # Offsets inside a multi-byte sequence resolve to the character that owns them
        return bisect_right(self._char_starts, byte_offset) - 1

    def position_at(self, offset: int) -> Tuple[int, int]:
        """Zero-based (line, column) of a character offset"""
        if not 0 <= offset <= len(self.source):
            raise IndexError(f"offset {offset} outside document of length {len(self.source)}")
        line = bisect_right(self._line_starts, offset) - 1
        return line, offset - self._line_starts[line]

    def offset_at(self, line: int, column: int) -> int:
        """Character offset of a zero-based (line, column); columns past the line end clamp to it"""
        if not 0 <= line < len(self._line_starts):
            raise IndexError(f"line {line} outside document of {len(self._line_starts)} lines")
        start = self._line_starts[line]
        if line + 1 < len(self._line_starts):
            end = self._line_starts[line + 1] - 1
        else:
            end = len(self.source)
        if column < 0:
            raise IndexError(f"negative column {column}")
        return min(start + column, end)

    def line_text(self, line: int) -> str:
        start = self._line_starts[line]
        end = self.source.find("\n", start)
        return self.source[start:] if end == -1 else self.source[start:end]
