"""Typer CLI entry point for columnar."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Tuple

import typer
from rich.console import Console
from rich.table import Table

from .config import GridConfig, load_config
from .grid import Grid
from .help import HelpFormatter, OptionDescriptor
from .width import EvenWidthAllocator

console = Console()
app = typer.Typer(help="Columnar: fixed-width text grids for terminal help output")


def configure_logger(verbose: bool) -> logging.Logger:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("columnar")


def _build_config(config_path: Optional[Path], total_width: Optional[int], delimiter: Optional[str], logger: logging.Logger) -> GridConfig:
    # The CLI always renders with "\n" line endings.
    try:
        base = load_config(config_path, logger, excluded=("line_terminator",)) if config_path is not None else GridConfig()
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    overrides = {
        "total_width": base.total_width if total_width is None else total_width,
        "line_terminator": "\n",
        "column_delimiter": base.column_delimiter if delimiter is None else delimiter,
        "rule_char": base.rule_char,
        "continuation_indent": base.continuation_indent,
    }
    try:
        return GridConfig(**overrides)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _read_rows(source: Path, logger: logging.Logger) -> Tuple[List[str], List[List[Any]]]:
    suffix = source.suffix.lower()
    if suffix == ".csv":
        with source.open(encoding="utf-8", newline="") as handle:
            records = list(csv.reader(handle))
        if not records:
            raise ValueError(f"CSV source {source} has no header row")
        logger.debug("Read %d CSV row(s) from %s", len(records) - 1, source)
        return records[0], [list(record) for record in records[1:]]

    if suffix == ".json":
        with source.open(encoding="utf-8") as handle:
            try:
                payload = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid JSON source at {source}: {exc}") from exc
        if not isinstance(payload, dict) or not isinstance(payload.get("headers"), list):
            raise ValueError(f"JSON source {source} must be an object with a 'headers' list")
        rows = payload.get("rows", [])
        if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
            raise ValueError(f"JSON source {source} must hold 'rows' as a list of lists")
        logger.debug("Read %d JSON row(s) from %s", len(rows), source)
        return [str(header) for header in payload["headers"]], rows

    raise typer.BadParameter(f"Unsupported source format {source.suffix!r}; use .json or .csv")


@app.command()
def render(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="JSON or CSV file with headers and rows."),
    total_width: Optional[int] = typer.Option(None, help="Total line width shared by the columns."),
    delimiter: Optional[str] = typer.Option(None, help="Text placed between columns."),
    config: Optional[Path] = typer.Option(None, exists=True, dir_okay=False, help="JSON file of grid config overrides (line_terminator is not accepted)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Render rows from a file as a text grid."""

    logger = configure_logger(verbose)
    grid_config = _build_config(config, total_width, delimiter, logger)
    headers, rows = _read_rows(source, logger)

    grid = Grid(headers, config=grid_config, logger=logger)
    for row in rows:
        grid.add_row(*row)

    typer.echo(grid.format(), nl=False)


@app.command()
def widths(
    columns: int = typer.Option(..., min=0, help="Number of columns to allocate."),
    total_width: int = typer.Option(80, min=1, help="Total line width shared by the columns."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Show the width each column receives."""

    logger = configure_logger(verbose)
    width = EvenWidthAllocator().calculate(total_width, columns)
    line_width = columns * width + max(columns - 1, 0)
    logger.debug("Allocated %d per column for %d column(s)", width, columns)

    table = Table(title="Width Allocation")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="magenta")
    table.add_row("Columns", str(columns))
    table.add_row("Total width", str(total_width))
    table.add_row("Column width", str(width))
    table.add_row("Line width", str(line_width))
    console.print(table)


@app.command()
def options(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="JSON list of option descriptors."),
    total_width: Optional[int] = typer.Option(None, help="Total line width shared by the columns."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Render option descriptors as help output."""

    logger = configure_logger(verbose)
    with source.open(encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON options at {source}: {exc}") from exc
    if not isinstance(payload, list) or not all(isinstance(entry, dict) for entry in payload):
        raise ValueError(f"Options file {source} must hold a JSON list of objects")

    descriptors = [OptionDescriptor.from_dict(entry) for entry in payload]
    formatter = HelpFormatter(config=_build_config(None, total_width, None, logger), logger=logger)
    typer.echo(formatter.format(descriptors).rstrip("\n"))


if __name__ == "__main__":
    app()
