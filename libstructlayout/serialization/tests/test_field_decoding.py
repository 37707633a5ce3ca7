import io
import json

import pytest

from libstructlayout.fields import Field
from libstructlayout.serialization import (
    FieldDecodeError,
    decode_fields,
    decode_fields_from_stream,
    encode_fields,
)


def test_decode_fields() -> None:
    fields = decode_fields(
        """[
            {"name": "T.a", "type": "int32", "start": 0, "end": 4, "size": 4, "align": 4, "is_padding": false},
            {"name": "", "type": "", "start": 4, "end": 8, "size": 4, "align": 0, "is_padding": true}
        ]""",
    )
    assert fields == [
        Field(name="T.a", type_name="int32", start=0, end=4, size=4, align=4),
        Field(name="", type_name="", start=4, end=8, size=4, align=0, is_padding=True),
    ]


def test_decode_fields_missing_keys_are_zero() -> None:
    (field,) = decode_fields('[{"start": 4, "end": 8, "size": 4, "is_padding": true}]')
    assert field == Field(
        name="",
        type_name="",
        start=4,
        end=8,
        size=4,
        align=0,
        is_padding=True,
    )


def test_decode_fields_empty() -> None:
    assert decode_fields("[]") == []
    assert decode_fields("null") == []


def test_decode_fields_from_stream() -> None:
    stream = io.StringIO('[{"name": "a", "type": "byte", "end": 1, "size": 1, "align": 1}]')
    assert [f.name for f in decode_fields_from_stream(stream)] == ["a"]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "[{",
        "{}",
        '"fields"',
        "[1]",
        "[[]]",
        "[" * 100_000,
        "[" * 100_000 + "]" * 100_000,
    ],
)
def test_decode_fields_malformed(text: str) -> None:
    with pytest.raises(FieldDecodeError):
        decode_fields(text)


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("start", '"0"'),
        ("size", "true"),
        ("align", "4.5"),
        ("is_padding", "1"),
        ("name", "42"),
        ("size", "-4"),
    ],
)
def test_decode_fields_invalid_value(key: str, value: str) -> None:
    with pytest.raises(FieldDecodeError) as exc_info:
        decode_fields(f'[{{"name": "ok", "size": 1, "align": 1}}, {{"{key}": {value}}}]')
    assert exc_info.value.index == 1
    assert exc_info.value.key == key
    assert f"field #1 (key '{key}')" in repr(exc_info.value)


def test_encode_fields() -> None:
    encoded = json.loads(
        encode_fields(
            [
                Field(name="T.b", type_name="int64", start=0, end=8, size=8, align=8),
                Field.padding(start=8, end=12),
            ],
        ),
    )
    assert encoded == [
        {
            "name": "T.b",
            "type": "int64",
            "start": 0,
            "end": 8,
            "size": 8,
            "align": 8,
            "is_padding": False,
        },
        {
            "name": "",
            "type": "",
            "start": 8,
            "end": 12,
            "size": 4,
            "align": 1,
            "is_padding": True,
        },
    ]
