import sys
from importlib.metadata import PackageNotFoundError, version
from platform import platform, python_implementation, python_version
from typing import NoReturn

from structlayout.cli.parser.arguments import CLIArguments

DISTRIBUTION_NAME = "structlayout-optimize"


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    print("[Struct layout optimizer]")
    print(f"\tVersion: {_get_distribution_version()}")
    print(f"\tRecurse into nested structs: {args.layout.recurse}")
    print(f"\tOutput format: {args.output_format}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    return sys.exit(0)


def _get_distribution_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "unknown (not installed)"
