"""JSON representation of layout as consumed and emitted by layout analysis tools."""

from .decoder import decode_field, decode_fields, decode_fields_from_stream
from .encoder import encode_field, encode_fields
from .exceptions import FieldDecodeError

__all__ = [
    "FieldDecodeError",
    "decode_field",
    "decode_fields",
    "decode_fields_from_stream",
    "encode_field",
    "encode_fields",
]
