"""Struct layout optimizer.

Reorders fields of an structure to minimize padding introduced by alignment,
recomputes offsets and materializes padding for new layout.
"""

from .fields import Field
from .structlayout import optimize_struct_layout
from .transform import LayoutConfig

__all__ = [
    "Field",
    "LayoutConfig",
    "optimize_struct_layout",
]
