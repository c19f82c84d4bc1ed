"""Configuration for grid rendering."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Iterable


@dataclass
class GridConfig:
    """Layout settings shared by a grid and its columns."""

    total_width: int = 80
    line_terminator: str = os.linesep
    column_delimiter: str = " "
    rule_char: str = "-"
    continuation_indent: str = "  "

    def __post_init__(self) -> None:
        if not isinstance(self.total_width, int) or isinstance(self.total_width, bool):
            raise ValueError(f"total_width must be an integer, got {self.total_width!r}")
        for name in ("line_terminator", "column_delimiter", "rule_char", "continuation_indent"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}")
        if self.total_width <= 0:
            raise ValueError(f"total_width must be positive, got {self.total_width}")
        if len(self.rule_char) != 1:
            raise ValueError(f"rule_char must be a single character, got {self.rule_char!r}")
        if not self.line_terminator:
            raise ValueError("line_terminator must not be empty")


def load_config(path: Path, logger: logging.Logger, excluded: Iterable[str] = ()) -> GridConfig:
    """Read a JSON object of ``GridConfig`` overrides.

    Args:
        path: JSON file holding a single object.
        logger: Logger configured by the caller.
        excluded: Keys the caller controls itself; present in the file they
            raise ``ValueError``.

    Returns:
        GridConfig with the overrides applied over the defaults.
    """

    if not path.exists():
        raise FileNotFoundError(f"Grid config not found: {path}")

    with path.open(encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON config at {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise ValueError(f"Grid config at {path} must be a JSON object")

    known = {field.name for field in fields(GridConfig)}
    unknown = sorted(set(payload) - known)
    if unknown:
        raise ValueError(f"Unknown grid config keys in {path}: {', '.join(unknown)}")

    rejected = sorted(set(payload) & set(excluded))
    if rejected:
        raise ValueError(f"Grid config keys not allowed here in {path}: {', '.join(rejected)}")

    overrides: Dict[str, Any] = dict(payload)
    logger.debug("Grid config overrides from %s: %s", path, overrides)
    return GridConfig(**overrides)
