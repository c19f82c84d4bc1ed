"""A single fixed-width column of wrapped text."""

from __future__ import annotations

import textwrap
from typing import Any, List, MutableSequence, Protocol

from .config import GridConfig


class ColumnLike(Protocol):
    """Operations the grid needs from a column."""

    def add_cells(self, value: Any) -> int:
        ...

    def add_cell(self, line: str) -> None:
        ...

    def height(self) -> int:
        ...

    def write_header_on(self, buffer: MutableSequence[str], has_more: bool) -> None:
        ...

    def write_separator_on(self, buffer: MutableSequence[str], has_more: bool) -> None:
        ...

    def write_cell_on(self, index: int, buffer: MutableSequence[str], has_more: bool) -> None:
        ...


class Column:
    """Header label plus the pre-wrapped lines stored under it.

    The width is fixed at creation. A header label longer than the
    requested width widens the column to fit it.
    """

    def __init__(self, header: str, width: int, config: GridConfig | None = None):
        self.config = config or GridConfig()
        self.header = header
        self.width = max(width, len(header), 1)
        self._lines: List[str] = []

    def add_cells(self, value: Any) -> int:
        """Wrap ``value`` into lines no wider than the column and store them.

        Embedded line breaks start a new line; continuation lines of a
        wrapped piece are indented. Empty pieces contribute nothing.

        Returns:
            Number of lines appended.
        """

        original_height = len(self._lines)
        source = str(value).strip()
        for piece in source.splitlines():
            for line in self._wrap(piece):
                self.add_cell(line)
        return len(self._lines) - original_height

    def add_cell(self, line: str) -> None:
        self._lines.append(line)

    def height(self) -> int:
        return len(self._lines)

    def lines(self) -> List[str]:
        return list(self._lines)

    def write_header_on(self, buffer: MutableSequence[str], has_more: bool) -> None:
        self._write_segment(buffer, self.header, has_more)

    def write_separator_on(self, buffer: MutableSequence[str], has_more: bool) -> None:
        self._write_segment(buffer, self.config.rule_char * self.width, has_more)

    def write_cell_on(self, index: int, buffer: MutableSequence[str], has_more: bool) -> None:
        text = self._lines[index] if index < len(self._lines) else ""
        self._write_segment(buffer, text, has_more)

    def _write_segment(self, buffer: MutableSequence[str], text: str, has_more: bool) -> None:
        buffer.append(text.ljust(self.width))
        if has_more:
            buffer.append(self.config.column_delimiter)

    def _wrap(self, piece: str) -> List[str]:
        indent = self.config.continuation_indent
        if len(indent) >= self.width:
            indent = ""
        return textwrap.wrap(
            piece,
            width=self.width,
            subsequent_indent=indent,
            break_long_words=True,
            break_on_hyphens=False,
        )

    def __repr__(self) -> str:
        return f"Column(header={self.header!r}, width={self.width}, height={self.height()})"
