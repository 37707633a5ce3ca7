from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING, Any

from libstructlayout.fields import Field
from libstructlayout.serialization.exceptions import FieldDecodeError

if TYPE_CHECKING:
    from collections.abc import Mapping

# Wire key -> (attribute of field, expected type, zero value when key is missing)
FIELD_WIRE_SCHEMA: dict[str, tuple[str, type, Any]] = {
    "name": ("name", str, ""),
    "type": ("type_name", str, ""),
    "start": ("start", int, 0),
    "end": ("end", int, 0),
    "size": ("size", int, 0),
    "align": ("align", int, 0),
    "is_padding": ("is_padding", bool, False),
}

# Values that must never be negative for layout to be meaningful
NON_NEGATIVE_KEYS = ("start", "end", "size")


def decode_fields_from_stream(stream: IO[str]) -> list[Field]:
    """Read whole stream and decode it as layout."""
    try:
        text = stream.read()
    except UnicodeDecodeError as e:
        raise FieldDecodeError(reason=f"input is not an valid text ({e})") from e
    return decode_fields(text)


def decode_fields(text: str) -> list[Field]:
    """Decode layout from JSON array of field objects.

    Missing keys are treated as zero values, `null` is treated as empty layout.
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise FieldDecodeError(reason=f"invalid JSON ({e})") from e
    except RecursionError as e:
        raise FieldDecodeError(reason="JSON is nested too deeply") from e

    if raw is None:
        return []

    if not isinstance(raw, list):
        raise FieldDecodeError(
            reason=f"expected an array of fields, got {_json_type_name(raw)}",
        )

    return [decode_field(item, index=index) for index, item in enumerate(raw)]


def decode_field(raw: object, *, index: int) -> Field:
    """Decode single field object, validating types of its values."""
    if not isinstance(raw, dict):
        raise FieldDecodeError(
            reason=f"expected an object, got {_json_type_name(raw)}",
            index=index,
        )

    values = {
        attribute: _decode_value(raw, key, expected, zero, index=index)
        for key, (attribute, expected, zero) in FIELD_WIRE_SCHEMA.items()
    }
    return Field(**values)


def _decode_value(
    raw: Mapping[str, object],
    key: str,
    expected: type,
    zero: object,
    *,
    index: int,
) -> object:
    value = raw.get(key)
    if value is None:
        return zero

    # `bool` is an subclass of `int` so it must be rejected explicitly for numbers
    is_valid = isinstance(value, expected) and (
        expected is bool or not isinstance(value, bool)
    )
    if not is_valid:
        raise FieldDecodeError(
            reason=f"expected {expected.__name__}, got {_json_type_name(value)}",
            index=index,
            key=key,
        )

    if key in NON_NEGATIVE_KEYS and isinstance(value, int) and value < 0:
        raise FieldDecodeError(
            reason=f"must not be negative, got {value}",
            index=index,
            key=key,
        )
    return value


def _json_type_name(value: object) -> str:
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case list():
            return "array"
        case dict():
            return "object"
        case _:
            return type(value).__name__
