import sys
from typing import NoReturn

from libstructlayout.fields import Field
from libstructlayout.serialization import decode_fields_from_stream
from libstructlayout.statistics import collect_layout_statistics
from libstructlayout.structlayout import optimize_struct_layout
from structlayout.cli.emit import emit_layout_into_stdout
from structlayout.cli.output import cli_message
from structlayout.cli.parser.arguments import CLIArguments


def cli_perform_optimize_goal(args: CLIArguments) -> NoReturn:
    """Perform optimize goal that reads layout, reorders it and emits resulting layout."""
    fields = cli_read_input_layout(args)

    layout = optimize_struct_layout(
        fields,
        args.layout,
        on_stage=lambda stage_name: cli_message(
            level="INFO",
            text=f"Applying '{stage_name}' stage",
            verbose=args.verbose,
        ),
    )
    cli_report_layout_statistics(fields, layout, args)

    emit_layout_into_stdout(layout, args.output_format)
    return sys.exit(0)


def cli_read_input_layout(args: CLIArguments) -> list[Field]:
    """Decode input layout from file or stdin."""
    if args.input_filepath is None:
        cli_message(level="INFO", text="Reading layout from stdin...", verbose=args.verbose)
        return decode_fields_from_stream(sys.stdin)

    cli_message(
        level="INFO",
        text=f"Reading layout from `{args.input_filepath}`...",
        verbose=args.verbose,
    )
    with args.input_filepath.open(encoding="utf-8") as stream:
        return decode_fields_from_stream(stream)


def cli_report_layout_statistics(
    original: list[Field],
    optimized: list[Field],
    args: CLIArguments,
) -> None:
    before = collect_layout_statistics(original)
    after = collect_layout_statistics(optimized)
    cli_message(
        level="INFO",
        text=f"Structure size {before.size} -> {after.size} bytes "
        f"(padding {before.padding} -> {after.padding} bytes, {after.fields} field(s))",
        verbose=args.verbose,
    )
