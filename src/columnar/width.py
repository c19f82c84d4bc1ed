"""Column width allocation."""

from __future__ import annotations

from typing import Protocol


class WidthAllocator(Protocol):
    """Splits a total display width across a number of columns."""

    def calculate(self, total_width: int, column_count: int) -> int:
        ...


class EvenWidthAllocator:
    """Give every column the same width, leaving room for one-character delimiters.

    The result satisfies ``count * width + (count - 1) <= total_width``.
    """

    def calculate(self, total_width: int, column_count: int) -> int:
        if column_count <= 1:
            return total_width

        remainder = total_width % column_count
        if remainder == column_count - 1:
            return total_width // column_count
        return total_width // column_count - 1
