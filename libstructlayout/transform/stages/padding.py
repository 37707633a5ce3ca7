from collections.abc import Sequence

from libstructlayout.fields import Field, align_offset


def pad_fields(fields: Sequence[Field]) -> list[Field]:
    """Place fields one after another respecting their alignment and fill gaps with padding.

    Does not apply trailing padding for alignment of whole structure,
    so last field end is exactly size of the layout.
    """
    padded: list[Field] = []

    offset = 0
    for field in fields:
        assert not field.is_padding, "Padding must be filtered out before recomputing offsets"

        aligned_offset = align_offset(offset, field.align)
        if aligned_offset > offset:
            padded.append(Field.padding(start=offset, end=aligned_offset))
            offset = aligned_offset

        padded.append(field.placed_at(offset))
        offset += field.size

    return padded
