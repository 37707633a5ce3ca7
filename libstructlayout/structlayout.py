"""Struct layout core entry."""

from collections.abc import Callable, Sequence

from libstructlayout.fields import Field, InvalidFieldAlignmentError
from libstructlayout.transform import LayoutConfig, create_layout_pipeline


def optimize_struct_layout(
    fields: Sequence[Field],
    config: LayoutConfig,
    *,
    on_stage: Callable[[str], None] | None = None,
) -> list[Field]:
    """Core entry for struct layout API.

    Reorders fields of given layout to minimize padding and recomputes their offsets,
    resulting layout contains explicit padding fields.

    :param fields: Current layout of an structure (may contain padding markers)
    :param on_stage: Called with name of each stage before it is applied
    """
    validate_field_alignments(fields)

    layout = list(fields)
    for stage, stage_name in create_layout_pipeline(config):
        if on_stage:
            on_stage(stage_name)
        layout = stage(layout)
    return layout


def validate_field_alignments(fields: Sequence[Field]) -> None:
    """Ensure that every non-padding field has positive alignment as offsets cannot be computed otherwise."""
    for field in fields:
        if field.is_padding:
            continue
        if field.align <= 0:
            raise InvalidFieldAlignmentError(alignment=field.align, field=field)
