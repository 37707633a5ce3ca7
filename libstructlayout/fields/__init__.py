"""Fields of structure memory layout and alignment arithmetic over them."""

from .alignment import align_offset
from .exceptions import InvalidFieldAlignmentError
from .field import STRUCT_TYPE_MARKER, Field

__all__ = [
    "STRUCT_TYPE_MARKER",
    "Field",
    "InvalidFieldAlignmentError",
    "align_offset",
]
