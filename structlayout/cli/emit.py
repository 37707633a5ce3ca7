"""Emission of resulting layout into stdout."""

from collections.abc import Sequence

from libstructlayout.fields import Field
from libstructlayout.serialization import encode_fields
from structlayout.cli.parser.arguments import OUTPUT_FORMAT_T

PADDING_DISPLAY_NAME = "padding"


def format_field(field: Field) -> str:
    """Human-readable single line representation of field."""
    span = f"{field.start}-{field.end} (size {field.size}, align {field.align})"
    if field.is_padding:
        return f"{PADDING_DISPLAY_NAME}: {span}"
    return f"{field.name} {field.type_name}: {span}"


def emit_layout_into_stdout(
    fields: Sequence[Field],
    output_format: OUTPUT_FORMAT_T,
) -> None:
    """Display layout via stdout in requested format."""
    if output_format == "structured":
        print(encode_fields(fields))
        return

    for field in fields:
        print(format_field(field))
