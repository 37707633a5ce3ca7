import json
from collections.abc import Sequence

from libstructlayout.fields import Field


def encode_field(field: Field) -> dict[str, object]:
    """Field as JSON-compatible object with wire keys."""
    return {
        "name": field.name,
        "type": field.type_name,
        "start": field.start,
        "end": field.end,
        "size": field.size,
        "align": field.align,
        "is_padding": field.is_padding,
    }


def encode_fields(fields: Sequence[Field]) -> str:
    """Encode layout as JSON array (single line, without trailing newline)."""
    return json.dumps([encode_field(field) for field in fields])
