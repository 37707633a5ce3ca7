from collections.abc import Sequence

from libstructlayout.fields import Field


def reorder_fields_key(field: Field) -> tuple[bool, int, int]:
    """Sorting key that places zero sized, then more tightly aligned, then larger fields first."""
    return (not field.is_zero_sized, -field.align, -field.size)


def reorder_fields(fields: Sequence[Field]) -> list[Field]:
    """Apply reordering of fields according to their alignment and size to minimize padding.

    This is greedy heuristic and not an optimal packing.
    Sort is stable so fields with same key keep their original order.
    Offsets are not recomputed here, see `pad_fields`.
    """
    return sorted(fields, key=reorder_fields_key)
