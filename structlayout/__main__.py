"""Entry point for CLI.

Only for calling via `python -m structlayout`, prefer installed `structlayout-optimize` executable.
"""

from structlayout.cli.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
