from __future__ import annotations

from columnar import Grid, HelpFormatter, OptionDescriptor


def build_options() -> list[OptionDescriptor]:
    return [
        OptionDescriptor(names=["h", "help"], description="Show this help message and exit."),
        OptionDescriptor(
            names=["o", "output"],
            description="File the rendered report is written to; created when missing.",
            argument_type="File",
            argument_description="path",
            required=True,
        ),
        OptionDescriptor(
            names=["width"],
            description="Total line width shared by all columns.",
            argument_type="Integer",
            argument_required=False,
            default_values=[80],
        ),
    ]


def main() -> None:
    print(HelpFormatter().format(build_options()))

    grid = Grid(["NAME", "AGE", "NOTES"])
    grid.add_row("Al", 30, "Prefers the short form of every flag.")
    grid.add_row("Bob", 7)
    print(grid.format())


if __name__ == "__main__":
    main()
