"""Columnar package for fixed-width terminal text grids."""

from .column import Column, ColumnLike
from .config import GridConfig, load_config
from .grid import Grid
from .help import HelpFormatter, OptionDescriptor
from .width import EvenWidthAllocator, WidthAllocator

__all__ = [
    "Column",
    "ColumnLike",
    "EvenWidthAllocator",
    "Grid",
    "GridConfig",
    "HelpFormatter",
    "OptionDescriptor",
    "WidthAllocator",
    "load_config",
]
