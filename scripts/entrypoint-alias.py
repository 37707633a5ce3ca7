# noqa: INP001
"""Script for aliasing `structlayout-optimize` (or whatever name) to structlayout module for correct resolution.

Prefer installing package, which provides `structlayout-optimize` executable.
"""

import sys
from pathlib import Path

# Add the project root (structlayout) to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from structlayout.cli.main import cli_entry_point  # noqa: E402

if __name__ == "__main__":
    cli_entry_point()
