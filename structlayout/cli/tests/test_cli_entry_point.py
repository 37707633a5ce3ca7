import io
import json
import sys
from pathlib import Path

import pytest

from libstructlayout.serialization import FieldDecodeError
from structlayout.cli.main import cli_entry_point

PADDED_LAYOUT = json.dumps(
    [
        {"name": "T.a", "type": "int32", "start": 0, "end": 4, "size": 4, "align": 4, "is_padding": False},
        {"name": "", "type": "", "start": 4, "end": 8, "size": 4, "align": 0, "is_padding": True},
        {"name": "T.b", "type": "int64", "start": 8, "end": 16, "size": 8, "align": 8, "is_padding": False},
    ],
)

NESTED_LAYOUT = json.dumps(
    [
        {"name": "T.c", "type": "byte", "start": 0, "end": 1, "size": 1, "align": 1},
        {"name": "T.s.x", "type": "int16", "start": 2, "end": 4, "size": 2, "align": 2},
        {"name": "T.s.y", "type": "byte", "start": 4, "end": 5, "size": 1, "align": 1},
    ],
)


def _run(
    monkeypatch: pytest.MonkeyPatch,
    argv: list[str],
    stdin: str = "",
) -> int | str | None:
    monkeypatch.setattr(sys, "stdin", io.StringIO(stdin))
    with pytest.raises(SystemExit) as exc_info:
        cli_entry_point(argv)
    return exc_info.value.code


def test_cli_human_readable_output(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert _run(monkeypatch, [], PADDED_LAYOUT) == 0
    assert capsys.readouterr().out.splitlines() == [
        "T.b int64: 0-8 (size 8, align 8)",
        "T.a int32: 8-12 (size 4, align 4)",
    ]


def test_cli_json_output(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert _run(monkeypatch, ["--json"], PADDED_LAYOUT) == 0
    fields = json.loads(capsys.readouterr().out)
    assert [(f["name"], f["start"], f["end"]) for f in fields] == [
        ("T.b", 0, 8),
        ("T.a", 8, 12),
    ]


def test_cli_padding_output(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert _run(monkeypatch, [], NESTED_LAYOUT) == 0
    assert capsys.readouterr().out.splitlines() == [
        "T.s struct: 0-4 (size 4, align 2)",
        "T.c byte: 4-5 (size 1, align 1)",
    ]

    assert _run(monkeypatch, ["-r"], NESTED_LAYOUT) == 0
    assert capsys.readouterr().out.splitlines() == [
        "T.s.x int16: 0-2 (size 2, align 2)",
        "T.c byte: 2-3 (size 1, align 1)",
        "T.s.y byte: 3-4 (size 1, align 1)",
    ]


def test_cli_reads_input_file(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
) -> None:
    path = tmp_path / "layout.json"
    path.write_text(PADDED_LAYOUT, encoding="utf-8")

    assert _run(monkeypatch, [str(path), "-json", "-v"]) == 0
    captured = capsys.readouterr()
    assert len(json.loads(captured.out)) == 2
    assert "Structure size 16 -> 12 bytes" in captured.err


def test_cli_empty_layout(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert _run(monkeypatch, [], "[]") == 0
    assert capsys.readouterr().out == ""

    assert _run(monkeypatch, ["--json"], "[]") == 0
    assert capsys.readouterr().out == "[]\n"


def test_cli_missing_input_file(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
) -> None:
    assert _run(monkeypatch, [str(tmp_path / "missing.json")]) == 1
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    ("stdin", "error_name"),
    [
        ("not a json", "field-decode-error"),
        ("[" * 100_000, "field-decode-error"),
        ('[{"name": "a", "size": 4, "align": 0}]', "invalid-field-alignment-error"),
    ],
)
def test_cli_invalid_layout(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    stdin: str,
    error_name: str,
) -> None:
    assert _run(monkeypatch, ["--json"], stdin) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert error_name in captured.err


def test_cli_unwrap_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("{}"))
    with pytest.raises(FieldDecodeError):
        cli_entry_point(["--debug-unwrap-errors"])


def test_cli_version(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert _run(monkeypatch, ["--version"]) == 0
    assert "[Struct layout optimizer]" in capsys.readouterr().out
