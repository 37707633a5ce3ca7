"""Struct layout optimizer toolchain.

Provides CLI over `libstructlayout`.
"""

from .cli.main import cli_entry_point

__all__ = [
    "cli_entry_point",
]
