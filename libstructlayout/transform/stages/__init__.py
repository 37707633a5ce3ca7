"""Stages of layout transformation, applied in order: grouping, reordering, padding."""

from .grouping import combine_grouped_fields
from .padding import pad_fields
from .reordering import reorder_fields, reorder_fields_key

__all__ = (
    "combine_grouped_fields",
    "pad_fields",
    "reorder_fields",
    "reorder_fields_key",
)
