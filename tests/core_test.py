import pytest

from unicode_punctuation.config import PipelineSpec, load_spec
from unicode_punctuation.core import configure_pass, input_artifact, run_artifact, run_records
from unicode_punctuation.framework import registry


def test_run_records_uses_default_pipeline() -> None:
    records = [
        {
            "title": "Rock 'n' Roll - Live",
            "annotation": "''Live'' 1970-80",
            "other": "a-b",
        },
        {"title": "Plain"},
    ]
    out, report = run_records(records)
    assert out[0] == {
        "title": "Rock ’n’ Roll – Live",
        "annotation": "''Live'' 1970–80",
        "other": "a-b",
    }
    assert out[1] == {"title": "Plain"}
    assert report["changes"] == {0: ["annotation", "title"]}
    assert report["metrics"]["guess_punctuation"]["changed_records"] == 1
    assert "fix_encoding" not in report["metrics"]
    assert set(report["timings"]) == {
        "fix_encoding",
        "guess_punctuation",
        "guess_markup_punctuation",
    }


def test_run_records_honors_options() -> None:
    spec = PipelineSpec(
        pipeline=["guess_punctuation"],
        options={"guess_punctuation": {"fields": ["name"]}},
    )
    out, report = run_records([{"name": "a-b", "title": "c-d"}], spec)
    assert out == [{"name": "a‐b", "title": "c-d"}]
    assert report["changes"] == {0: ["name"]}


def test_empty_batch() -> None:
    out, report = run_records([])
    assert out == []
    assert report["changes"] == {}


def test_unknown_step_raises() -> None:
    with pytest.raises(KeyError, match="unknown steps"):
        run_records([{"title": "x"}], PipelineSpec(pipeline=["nope"]))


def test_configure_pass_ignores_unknown_and_fixed_fields() -> None:
    base = registry()["guess_punctuation"]
    assert configure_pass(base, {}) is base
    assert configure_pass(base, {"name": "other", "bogus": 1}) is base
    configured = configure_pass(base, {"fields": ["x"]})
    assert configured.fields == ["x"]
    assert configured.name == "guess_punctuation"
    assert base.fields == ["title", "tracks", "media"]


def test_input_artifact_reads_jsonl(tmp_path) -> None:
    path = tmp_path / "in.jsonl"
    path.write_text('{"title": "a - b"}\n\n{"title": "c"}\n', encoding="utf-8")
    out, report = run_artifact(input_artifact(path), PipelineSpec())
    assert out == [{"title": "a – b"}, {"title": "c"}]
    assert report["changes"] == {0: ["title"]}


def test_input_artifact_rejects_bad_lines(tmp_path) -> None:
    path = tmp_path / "in.jsonl"
    path.write_text('{"title": "a"}\n[1, 2]\n', encoding="utf-8")
    with pytest.raises(ValueError, match="line 2"):
        input_artifact(path)


def test_scalar_fields_option_names_one_field() -> None:
    spec = PipelineSpec(options={"guess_punctuation": {"fields": "title"}})
    out, report = run_records([{"title": "a-b"}], spec)
    assert out == [{"title": "a‐b"}]
    assert report["changes"] == {0: ["title"]}


def test_scalar_fields_from_env_override(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("UNICODE_PUNCTUATION__GUESS_PUNCTUATION__FIELDS", "media")
    spec = load_spec(tmp_path / "missing.yaml")
    opts = spec.options["guess_punctuation"]
    configured = configure_pass(registry()["guess_punctuation"], opts)
    assert configured.fields == ["media"]
