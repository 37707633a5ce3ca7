import argparse
from argparse import ArgumentParser


def add_layout_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with layout transformation options into given parser."""
    group = parser.add_argument_group("Layout", "Layout transformation configuration")

    group.add_argument(
        "--recurse",
        "-r",
        dest="layout_recurse",
        required=False,
        action="store_true",
        help="If passed will break up nested structs and reorder their fields freely.",
    )


def add_output_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with output options into given parser."""
    group = parser.add_argument_group("Output", "Output format configuration")

    group.add_argument(
        "--json",
        "-json",
        dest="output_format",
        required=False,
        action="store_const",
        const="structured",
        default="human-readable",
        help="If passed will format resulting layout as JSON (same shape as input), otherwise one line per field.",
    )


def add_logging_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with logging options into given parser."""
    group = parser.add_argument_group("Logging", "Diagnostic messages (into stderr)")

    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs (stages, size of layout before and after).",
    )


def add_toolchain_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with internal toolchain debug options into given parser."""
    parser.add_argument(
        "--debug-unwrap-errors",
        dest="cli_debug_user_friendly_errors",
        action="store_false",
        default=True,
        help=argparse.SUPPRESS,
    )
