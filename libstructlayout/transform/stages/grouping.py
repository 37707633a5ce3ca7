from collections.abc import Sequence
from dataclasses import replace

from libstructlayout.fields import STRUCT_TYPE_MARKER, Field, align_offset


def combine_grouped_fields(fields: Sequence[Field]) -> list[Field]:
    """Collapse flattened fields of nested structures back into one field per top-level member.

    Fields are grouped by their two-component name prefix (`T.s.x` and `T.s.y` both belong to `T.s`),
    consecutive fields with same prefix are collapsed into single field which spans all of them.
    Padding markers are dropped as they describe original layout and will be regenerated.

    :param fields: Flattened (depth-first) layout, may contain padding markers
    """
    combined: list[Field] = []
    run: list[Field] = []

    for field in fields:
        if field.is_padding:
            continue

        if run and field.prefix != run[0].prefix:
            combined.append(_collapse_run(run))
            run = []
        run.append(field)

    if run:
        combined.append(_collapse_run(run))
    return combined


def _collapse_run(run: Sequence[Field]) -> Field:
    """Build single field from run of fields sharing same prefix."""
    first = run[0]
    alignment = max(field.align for field in run)
    end = max(field.end for field in run)

    if len(run) == 1:
        # Lone field is kept as-is and only renamed
        return replace(first, name=first.prefix, size=end - first.start)

    if alignment > 0:
        # Nested structure carries its tail padding within its own size
        end = first.start + align_offset(end - first.start, alignment)

    return replace(
        first,
        name=first.prefix,
        type_name=STRUCT_TYPE_MARKER,
        end=end,
        size=end - first.start,
        align=alignment,
    )
