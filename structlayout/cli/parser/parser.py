from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, cast, get_args

from libstructlayout.transform import LayoutConfig, merge_into_layout_config
from structlayout.cli.output import cli_fatal_abort
from structlayout.cli.parser.arguments import OUTPUT_FORMAT_T, CLIArguments

if TYPE_CHECKING:
    from argparse import Namespace

STDIN_FILENAME = "-"


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    return CLIArguments(
        version=bool(args.version),
        verbose=bool(args.verbose),
        input_filepath=_process_input_filepath(args),
        output_format=_process_output_format(args),
        layout=merge_into_layout_config(LayoutConfig(), args, prefix="layout"),
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _process_output_format(args: Namespace) -> OUTPUT_FORMAT_T:
    """Validate and process output format as type safe value."""
    allowed_formats = get_args(OUTPUT_FORMAT_T.__value__)
    assert args.output_format in allowed_formats, (
        f"{args.output_format} not in {allowed_formats}"
    )
    return cast("OUTPUT_FORMAT_T", args.output_format)


def _process_input_filepath(args: Namespace) -> Path | None:
    """Process input file as path and validate it, stdin is treated as no path."""
    if args.version or args.input_file == STDIN_FILENAME:
        return None

    path = Path(args.input_file)
    if not path.is_file():
        return cli_fatal_abort(
            text=f"Input file `{path}` does not exists or is not an file!",
        )
    return path
