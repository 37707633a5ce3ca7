from libstructlayout.fields.exceptions import InvalidFieldAlignmentError


def align_offset(offset: int, alignment: int) -> int:
    """Round offset up to the nearest multiple of alignment (smallest `y >= offset` where `y % alignment == 0`)."""
    if alignment <= 0:
        raise InvalidFieldAlignmentError(alignment=alignment)
    y = offset + alignment - 1
    return y - y % alignment
