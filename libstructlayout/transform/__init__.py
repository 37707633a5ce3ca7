"""Transformation of structure layout into memory-efficient one."""

from .config import LayoutConfig, merge_into_layout_config
from .pipeline import create_layout_pipeline, drop_padding_fields

__all__ = (
    "LayoutConfig",
    "create_layout_pipeline",
    "drop_padding_fields",
    "merge_into_layout_config",
)
