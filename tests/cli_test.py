import json
from pathlib import Path

from typer.testing import CliRunner

from unicode_punctuation.cli import app
from unicode_punctuation.punctuation import DEFAULT_RULES

runner = CliRunner()


def _write_jsonl(path: Path, rows: list[dict]) -> Path:
    path.write_text("".join(json.dumps(r) + "\n" for r in rows), encoding="utf-8")
    return path


def test_guess_argument() -> None:
    result = runner.invoke(app, ["guess", 'He said "hello"'])
    assert result.exit_code == 0
    assert result.output == "He said “hello”\n"


def test_guess_reads_stdin_lines() -> None:
    result = runner.invoke(app, ["guess"], input='a-b\n12" vinyl\n')
    assert result.exit_code == 0
    assert result.output.splitlines() == ["a‐b", "12″ vinyl"]


def test_guess_markup_flag() -> None:
    text = "''It's'' [http://x.org/a-b]"
    plain = runner.invoke(app, ["guess", text])
    guarded = runner.invoke(app, ["guess", "--markup", text])
    assert guarded.output == "''It’s'' [http://x.org/a-b]\n"
    assert plain.output != guarded.output


def test_rules_lists_rules_in_order() -> None:
    result = runner.invoke(app, ["rules"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == len(DEFAULT_RULES)
    assert lines[0].strip().startswith("1. double_quotes:")
    assert lines[-1].strip().startswith("12. hyphen:")


def test_rules_json() -> None:
    result = runner.invoke(app, ["rules", "--json"])
    rows = json.loads(result.output)
    assert tuple(r["name"] for r in rows) == DEFAULT_RULES.names()


def test_records_writes_output_and_summary(tmp_path: Path) -> None:
    src = _write_jsonl(
        tmp_path / "in.jsonl",
        [
            {"title": "The 70's - Live", "annotation": "'''Best''' of 1970-1979"},
            {"title": "Plain"},
        ],
    )
    out = tmp_path / "out" / "result.jsonl"
    result = runner.invoke(
        app,
        ["records", str(src), "--out", str(out), "--spec", str(tmp_path / "none.yaml")],
    )
    assert result.exit_code == 0, result.output
    rows = [json.loads(line) for line in out.read_text(encoding="utf-8").splitlines()]
    assert rows[0] == {"title": "The 70’s – Live", "annotation": "'''Best''' of 1970–1979"}
    assert rows[1] == {"title": "Plain"}
    assert "changed: 1 of 2 records" in result.output
    assert "#0: annotation, title" in result.output


def test_records_field_overrides(tmp_path: Path) -> None:
    src = _write_jsonl(tmp_path / "in.jsonl", [{"name": "a-b", "title": "c-d"}])
    result = runner.invoke(
        app,
        [
            "records",
            str(src),
            "--fields",
            "name",
            "--spec",
            str(tmp_path / "none.yaml"),
        ],
    )
    assert result.exit_code == 0, result.output
    rows = [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]
    assert rows == [{"name": "a‐b", "title": "c-d"}]


def test_records_reports_bad_input(tmp_path: Path) -> None:
    src = tmp_path / "in.jsonl"
    src.write_text('{"title": "ok"}\nnot json\n', encoding="utf-8")
    result = runner.invoke(app, ["records", str(src), "--spec", str(tmp_path / "none.yaml")])
    assert result.exit_code == 1
    assert "error: line 2" in result.output
