from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from columnar.config import GridConfig, load_config


LOGGER = logging.getLogger("test-config")


def test_defaults() -> None:
    config = GridConfig()

    assert config.total_width == 80
    assert config.column_delimiter == " "
    assert config.rule_char == "-"


@pytest.mark.parametrize(
    "overrides",
    [
        {"total_width": 0},
        {"total_width": 80.5},
        {"total_width": "100"},
        {"total_width": True},
        {"rule_char": "=="},
        {"rule_char": 1},
        {"line_terminator": ""},
        {"column_delimiter": None},
        {"continuation_indent": 2},
    ],
)
def test_invalid_values_raise(overrides: dict) -> None:
    with pytest.raises(ValueError):
        GridConfig(**overrides)


def test_load_config_applies_overrides(tmp_path: Path) -> None:
    path = tmp_path / "grid.json"
    path.write_text(json.dumps({"total_width": 100, "rule_char": "="}))

    config = load_config(path, LOGGER)

    assert config.total_width == 100
    assert config.rule_char == "="
    assert config.column_delimiter == " "


def test_load_config_rejects_unknown_keys(tmp_path: Path) -> None:
    path = tmp_path / "grid.json"
    path.write_text(json.dumps({"colour": "red"}))

    with pytest.raises(ValueError, match="colour"):
        load_config(path, LOGGER)


def test_load_config_rejects_bad_json(tmp_path: Path) -> None:
    path = tmp_path / "grid.json"
    path.write_text("{not json")

    with pytest.raises(ValueError, match="Invalid JSON"):
        load_config(path, LOGGER)


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.json", LOGGER)


@pytest.mark.parametrize("payload", [{"total_width": "100"}, {"total_width": 80.5}, {"column_delimiter": 3}])
def test_load_config_rejects_wrong_types(tmp_path: Path, payload: dict) -> None:
    path = tmp_path / "grid.json"
    path.write_text(json.dumps(payload))

    with pytest.raises(ValueError):
        load_config(path, LOGGER)


def test_load_config_rejects_excluded_keys(tmp_path: Path) -> None:
    path = tmp_path / "grid.json"
    path.write_text(json.dumps({"line_terminator": "\r\n", "total_width": 60}))

    with pytest.raises(ValueError, match="line_terminator"):
        load_config(path, LOGGER, excluded=("line_terminator",))
    assert load_config(path, LOGGER).line_terminator == "\r\n"
