from argparse import ArgumentParser

from structlayout.cli.parser import groups


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="Struct layout optimizer - reorders fields of an struct layout (JSON) to minimize padding",
        usage=f"{prog} [file] [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "input_file",
        help="Input layout as JSON array of fields, reads stdin when omitted or `-`",
        nargs="?",
        default="-",
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    groups.add_layout_group(parser)
    groups.add_output_group(parser)
    groups.add_logging_group(parser)
    groups.add_toolchain_debug_group(parser)
    return parser
