import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from libstructlayout.exceptions import StructLayoutError
from structlayout.cli.output import cli_fatal_abort, cli_message


@contextmanager
def cli_structlayout_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Wrap function to properly emit struct layout errors."""
    try:
        yield
    except StructLayoutError as le:
        if debug_user_friendly_errors:
            return cli_fatal_abort(f"{le.generic_error_name} {le!r}")
        raise  # re-throw exception due to unfriendly flag set for debugging
    except OSError as oe:
        return cli_fatal_abort(f"Unable to read input: {oe}")
    except KeyboardInterrupt:
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        return sys.exit(0)
    # This is unreachable but error wrapper must fail
    cli_fatal_abort("Bug in a CLI: error handler must has no-return")
