from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutConfig:
    """Configuration for layout transformation stages."""

    # Break up nested structures and reorder their fields freely (skips grouping)
    recurse: bool = False


def merge_into_layout_config(
    config: LayoutConfig,
    from_object: object,
    *,
    prefix: str = "",
) -> LayoutConfig:
    """Construct new config with values taken from attributes of given object (e.g parsed arguments), if present."""
    overrides: dict[str, object] = {}
    for field in dataclasses.fields(LayoutConfig):
        from_name = prefix + "_" + field.name if prefix else field.name
        if hasattr(from_object, from_name):
            arg_value = getattr(from_object, from_name)
            if arg_value is not None:
                overrides[field.name] = arg_value
    return dataclasses.replace(config, **overrides)
