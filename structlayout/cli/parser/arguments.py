from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from libstructlayout.transform import LayoutConfig

type OUTPUT_FORMAT_T = Literal["structured", "human-readable"]


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole optimizer process."""

    # None when layout is read from stdin
    input_filepath: Path | None
    output_format: OUTPUT_FORMAT_T

    layout: LayoutConfig

    version: bool
    verbose: bool
    cli_debug_user_friendly_errors: bool
