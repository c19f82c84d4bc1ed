"""Grid coordinator rendering rows of values as fixed-width text."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, MutableSequence, Sequence, Tuple

from .column import Column, ColumnLike
from .config import GridConfig
from .width import EvenWidthAllocator, WidthAllocator

LOGGER = logging.getLogger(__name__)


class Grid:
    """Lay out data under a fixed set of column headers.

    Rows may hold fewer values than there are headers; values beyond the
    header count are dropped. Only the columns that receive a value in an
    ``add_row`` call are padded to that row's height, so rows of differing
    arity can leave columns with different heights.
    """

    def __init__(
        self,
        headers: Iterable[str],
        config: GridConfig | None = None,
        allocator: WidthAllocator | None = None,
        logger: logging.Logger | None = None,
    ):
        self.config = config or GridConfig()
        self.allocator = allocator or EvenWidthAllocator()
        self.logger = logger or LOGGER
        self._headers: Tuple[str, ...] = tuple(headers)
        self._columns: List[ColumnLike] = []
        self._column_width = 0

        self.clear()

    @property
    def headers(self) -> Tuple[str, ...]:
        return self._headers

    @property
    def column_width(self) -> int:
        """Width handed to every column by the allocator."""

        return self._column_width

    def heights(self) -> List[int]:
        return [column.height() for column in self._columns]

    def add_row(self, *values: Any) -> None:
        """Add one row of values under the headers, in order.

        Args:
            *values: Cell contents; each is converted with ``str`` and
                wrapped to its column's width.
        """

        if len(values) > len(self._columns):
            self.logger.debug(
                "Dropping %d value(s) beyond %d header(s)",
                len(values) - len(self._columns),
                len(self._columns),
            )

        added = self._add_row_cells(values)
        self._add_padding_cells(added)

    def format(self) -> str:
        """Render headers, a separator rule, and every stored row."""

        buffer: List[str] = []

        self._write_headers_on(buffer)
        self._write_separators_on(buffer)
        self._write_rows_on(buffer)

        return "".join(buffer)

    def clear(self) -> None:
        """Remove all rows while keeping the headers and column width."""

        self._columns.clear()

        # The allocator reserves one character per delimiter.
        gaps = max(len(self._headers) - 1, 0)
        available = self.config.total_width - (len(self.config.column_delimiter) - 1) * gaps
        self._column_width = self.allocator.calculate(available, len(self._headers))
        self.logger.debug(
            "Allocated width %d to each of %d column(s) from available width %d",
            self._column_width,
            len(self._headers),
            available,
        )
        for header in self._headers:
            self._columns.append(self._new_column(header))

    def _new_column(self, header: str) -> ColumnLike:
        return Column(header, self._column_width, self.config)

    def _add_row_cells(self, values: Sequence[Any]) -> List[Tuple[ColumnLike, int]]:
        return [(column, column.add_cells(value)) for column, value in zip(self._columns, values)]

    def _add_padding_cells(self, added: Sequence[Tuple[ColumnLike, int]]) -> None:
        row_height = max((count for _, count in added), default=0)

        for column, count in added:
            for _ in range(row_height - count):
                column.add_cell("")

    def _write_headers_on(self, buffer: MutableSequence[str]) -> None:
        last = len(self._columns) - 1
        for position, column in enumerate(self._columns):
            column.write_header_on(buffer, position < last)

        buffer.append(self.config.line_terminator)

    def _write_separators_on(self, buffer: MutableSequence[str]) -> None:
        last = len(self._columns) - 1
        for position, column in enumerate(self._columns):
            column.write_separator_on(buffer, position < last)

        buffer.append(self.config.line_terminator)

    def _write_rows_on(self, buffer: MutableSequence[str]) -> None:
        max_height = max(self.heights(), default=0)
        self.logger.debug("Rendering %d body line(s) across %d column(s)", max_height, len(self._columns))

        for index in range(max_height):
            self._write_row_on(buffer, index)

    def _write_row_on(self, buffer: MutableSequence[str], index: int) -> None:
        last = len(self._columns) - 1
        for position, column in enumerate(self._columns):
            column.write_cell_on(index, buffer, position < last)

        buffer.append(self.config.line_terminator)

    def __str__(self) -> str:
        return self.format()
