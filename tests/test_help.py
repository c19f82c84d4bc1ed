from __future__ import annotations

import logging

import pytest

from columnar.config import GridConfig
from columnar.help import NO_OPTIONS, HelpFormatter, OptionDescriptor


LOGGER = logging.getLogger("test-help")


def _formatter() -> HelpFormatter:
    return HelpFormatter(config=GridConfig(line_terminator="\n"), logger=LOGGER)


def test_no_options() -> None:
    assert _formatter().format([]) == NO_OPTIONS


def test_flag_option_row() -> None:
    options = [OptionDescriptor(names=["v", "verbose"], description="Enable debug logging.")]

    lines = _formatter().format(options).split("\n")

    assert lines[0] == "Option".ljust(39) + " " + "Description".ljust(39)
    assert lines[2] == "-v, --verbose".ljust(39) + " " + "Enable debug logging.".ljust(39)


def test_required_and_argument_markers() -> None:
    options = [
        OptionDescriptor(
            names=["o", "output"],
            description="Where to write.",
            argument_type="File",
            argument_description="target",
            required=True,
        ),
        OptionDescriptor(
            names=["width"],
            description="Line width",
            argument_type="Integer",
            argument_required=False,
            default_values=[80],
        ),
    ]

    output = _formatter().format(options)
    lines = output.split("\n")

    assert lines[0].startswith("Option (* = required)")
    assert lines[2].startswith("* -o, --output <File: target>")
    assert lines[3].startswith("--width [Integer]")
    assert "Line width (default: 80)" in lines[3]


def test_options_keep_supplied_order() -> None:
    options = [OptionDescriptor(names=["zeta"]), OptionDescriptor(names=["alpha"])]

    lines = _formatter().format(options).split("\n")

    assert lines[2].startswith("--zeta")
    assert lines[3].startswith("--alpha")


def test_long_description_wraps_under_its_option() -> None:
    description = "Print a very long explanation of what this option does, long enough to wrap."
    options = [OptionDescriptor(names=["x"], description=description)]

    lines = _formatter().format(options).split("\n")[:-1]

    assert len(lines) > 3
    assert lines[2].startswith("-x")
    assert all(line[:39].strip() == "" for line in lines[3:])


def test_from_dict_and_validation() -> None:
    option = OptionDescriptor.from_dict({"names": ["n"], "argument_type": "Integer", "default_values": [1, 2]})

    assert option.accepts_arguments is True
    assert option.default_values == [1, 2]

    with pytest.raises(ValueError):
        OptionDescriptor.from_dict({"names": "n"})
    with pytest.raises(ValueError):
        OptionDescriptor(names=[])


def test_argument_without_type_or_description_has_no_marker() -> None:
    options = [OptionDescriptor(names=["x"], description="Takes a value.", accepts_arguments=True)]

    lines = _formatter().format(options).split("\n")

    assert lines[2] == "-x".ljust(39) + " " + "Takes a value.".ljust(39)
    assert "<>" not in lines[2]


@pytest.mark.parametrize("key", ["required", "argument_required", "accepts_arguments"])
def test_from_dict_requires_real_booleans(key: str) -> None:
    with pytest.raises(ValueError, match=key):
        OptionDescriptor.from_dict({"names": ["n"], key: "false"})

    option = OptionDescriptor.from_dict({"names": ["n"], key: False})
    assert getattr(option, key) is False
