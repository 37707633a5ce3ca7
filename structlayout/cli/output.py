"""User facing messages of CLI.

Messages are written into stderr, as stdout is reserved for resulting layout.
"""

import sys
from typing import Literal, NoReturn

type MESSAGE_LEVEL_T = Literal["INFO", "WARNING", "ERROR"]


class CLIColor:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"


LEVEL_COLORS: dict[MESSAGE_LEVEL_T, str] = {
    "INFO": CLIColor.BLUE,
    "WARNING": CLIColor.YELLOW,
    "ERROR": CLIColor.RED,
}


def cli_message(
    level: MESSAGE_LEVEL_T,
    text: str,
    *,
    verbose: bool = True,
) -> None:
    """Emit message for user, INFO messages are hidden unless verbose."""
    if level == "INFO" and not verbose:
        return

    tag = f"[{level}]"
    if sys.stderr.isatty():
        tag = f"{LEVEL_COLORS[level]}{tag}{CLIColor.RESET}"
    print(tag, text, file=sys.stderr)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit error and terminate process with failure exit code."""
    cli_message("ERROR", text)
    sys.exit(1)
