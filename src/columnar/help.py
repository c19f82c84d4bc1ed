"""Render option descriptions as an ``Option`` / ``Description`` grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from .config import GridConfig
from .grid import Grid

LOGGER = logging.getLogger(__name__)

NO_OPTIONS = "No options specified"


@dataclass
class OptionDescriptor:
    """What the help output knows about one command-line option."""

    names: List[str]
    description: str = ""
    argument_description: str = ""
    argument_type: str = ""
    argument_required: bool = True
    default_values: List[Any] = field(default_factory=list)
    required: bool = False
    accepts_arguments: bool = False

    def __post_init__(self) -> None:
        if not self.names:
            raise ValueError("An option needs at least one name")
        if self.argument_description or self.argument_type:
            self.accepts_arguments = True

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "OptionDescriptor":
        names = payload.get("names")
        if not isinstance(names, list) or not all(isinstance(name, str) for name in names):
            raise ValueError(f"Option 'names' must be a list of strings, got {names!r}")
        return cls(
            names=list(names),
            description=str(payload.get("description", "")),
            argument_description=str(payload.get("argument_description", "")),
            argument_type=str(payload.get("argument_type", "")),
            argument_required=_flag(payload, "argument_required", True),
            default_values=list(payload.get("default_values", [])),
            required=_flag(payload, "required", False),
            accepts_arguments=_flag(payload, "accepts_arguments", False),
        )


class HelpFormatter:
    """Format option descriptors the way ``--help`` output lists them."""

    def __init__(self, config: GridConfig | None = None, logger: logging.Logger | None = None):
        self.config = config or GridConfig()
        self.logger = logger or LOGGER

    def format(self, options: Sequence[OptionDescriptor]) -> str:
        if not options:
            return NO_OPTIONS

        grid = Grid(self._headers(options), config=self.config, logger=self.logger)
        for option in options:
            grid.add_row(self._option_cell(option), self._description_cell(option))

        self.logger.debug("Formatted help for %d option(s)", len(options))
        return grid.format()

    def _headers(self, options: Sequence[OptionDescriptor]) -> List[str]:
        if any(option.required for option in options):
            return ["Option (* = required)", "Description"]
        return ["Option", "Description"]

    def _option_cell(self, option: OptionDescriptor) -> str:
        names = ", ".join(_option_name(name) for name in option.names)
        cell = f"* {names}" if option.required else names
        if option.accepts_arguments:
            argument = self._argument_cell(option)
            if argument:
                cell += " " + argument
        return cell

    def _argument_cell(self, option: OptionDescriptor) -> str:
        parts = [part for part in (option.argument_type, option.argument_description) if part]
        inner = ": ".join(parts)
        if not inner:
            return ""
        if option.argument_required:
            return f"<{inner}>"
        return f"[{inner}]"

    def _description_cell(self, option: OptionDescriptor) -> str:
        if not option.default_values:
            return option.description
        defaults = ", ".join(str(value) for value in option.default_values)
        return f"{option.description} (default: {defaults})".strip()


def _option_name(name: str) -> str:
    prefix = "-" if len(name) == 1 else "--"
    return prefix + name


def _flag(payload: Dict[str, Any], key: str, default: bool) -> bool:
    value = payload.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"Option {key!r} must be true or false, got {value!r}")
    return value
