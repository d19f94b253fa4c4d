from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable, Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

import typer

from unicode_punctuation.adapters import emit_jsonl
from unicode_punctuation.config import load_spec
from unicode_punctuation.core import input_artifact, run_artifact
from unicode_punctuation.markup import guess_punctuation_preserving_markup
from unicode_punctuation.punctuation import DEFAULT_RULES, guess_punctuation

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _spec_path_candidates(path: str | Path) -> Iterator[Path]:
    """Yield potential spec locations without hitting the filesystem."""
    candidate = Path(path)
    pkg_dir = Path(__file__).resolve().parent
    yield from (
        candidate,
        pkg_dir.parent / candidate,
        pkg_dir / candidate,
    )


def _resolve_spec_path(path: str | Path) -> Path:
    """Pick the first existing pipeline spec from candidate locations."""
    return next((p for p in _spec_path_candidates(path) if p.exists()), Path(path))


def _split_csv(value: str | None) -> list[str] | None:
    if value is None:
        return None
    return [part.strip() for part in value.split(",") if part.strip()]


def _cli_overrides(
    fields: str | None,
    markup_fields: str | None,
    fix_encoding: bool,
) -> dict[str, dict[str, Any]]:
    plain = _split_csv(fields)
    markup = _split_csv(markup_fields)
    return {
        k: v
        for k, v in {
            "guess_punctuation": {"fields": plain} if plain is not None else {},
            "guess_markup_punctuation": {"fields": markup} if markup is not None else {},
            "fix_encoding": {"enabled": True} if fix_encoding else {},
        }.items()
        if v
    }


def _exit_with_error(exc: Exception) -> None:
    """Print ``exc`` to stderr and exit with status 1."""
    print(f"error: {exc}", file=sys.stderr)
    raise typer.Exit(1)


def _safe(func: Callable[[], None]) -> None:
    """Invoke ``func`` and exit non-zero on any exception."""
    try:
        func()
    except Exception as exc:
        _exit_with_error(exc)


def _format_changes(changes: Mapping[int, Iterable[str]], total: int) -> str:
    lines = [f"changed: {len(changes)} of {total} records"]
    lines.extend(f"  #{i}: {', '.join(fields)}" for i, fields in changes.items())
    return "\n".join(lines)


def _run_records(
    input_path: Path,
    out: Path | None,
    spec: str,
    fields: str | None,
    markup_fields: str | None,
    fix_encoding: bool,
) -> None:
    s = load_spec(
        _resolve_spec_path(spec),
        overrides=_cli_overrides(fields, markup_fields, fix_encoding),
    )
    records, report = run_artifact(input_artifact(input_path), s)
    if out is None:
        sys.stdout.write(emit_jsonl.dumps(records))
    else:
        emit_jsonl.write(records, out)
    print(_format_changes(report["changes"], len(records)), file=sys.stderr)


@app.command()
def guess(
    text: str | None = typer.Argument(
        None, help="Text to transform; reads stdin lines when omitted."
    ),
    markup: bool = typer.Option(False, "--markup", help="Preserve wiki markup and link targets."),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    """Print TEXT with ASCII punctuation replaced by its likely Unicode counterpart."""
    _configure_logging(verbose)
    transform = guess_punctuation_preserving_markup if markup else guess_punctuation
    lines = [text] if text is not None else (line.rstrip("\n") for line in sys.stdin)
    for line in lines:
        print(transform(line))


@app.command()
def records(
    input_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    out: Path | None = typer.Option(None, "--out"),
    spec: str = typer.Option("pipeline.yaml", "--spec"),
    fields: str | None = typer.Option(None, "--fields", help="Comma-separated title fields."),
    markup_fields: str | None = typer.Option(
        None, "--markup-fields", help="Comma-separated free-text fields with markup."
    ),
    fix_encoding: bool = typer.Option(False, "--fix-encoding"),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    """Guess punctuation for the fields of every record in a JSON Lines file."""
    _configure_logging(verbose)
    _safe(lambda: _run_records(input_path, out, spec, fields, markup_fields, fix_encoding))


@app.command()
def rules(as_json: bool = typer.Option(False, "--json")) -> None:
    """List the punctuation rules in the order they are applied."""
    rows = [{"name": r.name, "description": r.description} for r in DEFAULT_RULES]
    if as_json:
        print(json.dumps(rows, indent=2, ensure_ascii=False))
        return
    for number, row in enumerate(rows, start=1):
        print(f"{number:2d}. {row['name']}: {row['description']}")


if __name__ == "__main__":
    app()
