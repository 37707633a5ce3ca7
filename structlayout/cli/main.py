"""`structlayout-optimize` executable entry."""

from __future__ import annotations

import sys
from pathlib import Path

from structlayout.cli.errors import cli_structlayout_error_handler
from structlayout.cli.goals import perform_desired_toolchain_goal
from structlayout.cli.output import cli_message
from structlayout.cli.parser.builder import build_cli_parser
from structlayout.cli.parser.parser import parse_cli_arguments

EXECUTABLE_NAME = "structlayout-optimize"


def cli_entry_point(argv: list[str] | None = None) -> None:
    """Read layout, optimize it and emit result, terminates process with exit code of the goal."""
    parser = build_cli_parser(cli_resolve_program_name())
    args = parse_cli_arguments(parser.parse_args(argv))

    with cli_structlayout_error_handler(
        debug_user_friendly_errors=args.cli_debug_user_friendly_errors,
    ):
        perform_desired_toolchain_goal(args)

    # Goals always exit, falling through means an goal was not dispatched
    cli_message("ERROR", f"Bug in a CLI: {EXECUTABLE_NAME} must perform at least one goal!")
    sys.exit(1)


def cli_resolve_program_name() -> str:
    """Name shown in usage, running from a checkout (`__main__.py`, alias script) shows installed name instead."""
    prog = Path(sys.argv[0]).name
    if prog.endswith(".py"):
        cli_message(
            level="WARNING",
            text=f"Running `{prog}` directly, install package to get `{EXECUTABLE_NAME}` executable.",
        )
        return EXECUTABLE_NAME
    return prog


if __name__ == "__main__":
    cli_entry_point()
