from __future__ import annotations

import time
from collections.abc import Mapping, Sequence
from dataclasses import fields, is_dataclass, replace
from functools import reduce
from pathlib import Path
from typing import Any

from unicode_punctuation import passes  # noqa: F401  (registers passes)
from unicode_punctuation.adapters import io_jsonl
from unicode_punctuation.config import PipelineSpec
from unicode_punctuation.framework import Artifact, Pass, registry
from unicode_punctuation.records import Record


def _pass_steps(spec: PipelineSpec) -> list[str]:
    """Return the pipeline steps; error on unregistered ones."""
    regs = registry()
    steps = spec.steps()
    unknown = [s for s in steps if s not in regs]
    if unknown:
        raise KeyError(f"unknown steps: {unknown}")
    return steps


def _coerce_option(current: Any, value: Any) -> Any:
    """Wrap a scalar string given for a list option, e.g. ``fields: title``."""
    if isinstance(current, list) and isinstance(value, str):
        return [value]
    return value


def configure_pass(pass_obj: Pass, opts: Mapping[str, Any]) -> Pass:
    """Return a new pass with ``opts`` merged without mutating ``pass_obj``."""
    if not opts or not is_dataclass(pass_obj):
        return pass_obj
    names = {f.name for f in fields(pass_obj) if f.init}
    updates = {
        k: _coerce_option(getattr(pass_obj, k), v) for k, v in opts.items() if k in names
    }
    return replace(pass_obj, **updates) if updates else pass_obj


def _time_step(
    acc: tuple[Artifact, dict[str, float]],
    p: Pass,
) -> tuple[Artifact, dict[str, float]]:
    """Apply ``p`` to ``acc`` while recording its execution time."""
    a, timings = acc
    t0 = time.perf_counter()
    a = p(a)
    return a, {**timings, p.name: time.perf_counter() - t0}


def run_passes(spec: PipelineSpec, a: Artifact) -> tuple[Artifact, dict[str, float]]:
    """Run the configured passes over ``a`` capturing per-pass timings."""
    regs = registry()
    configured = [
        configure_pass(regs[name], spec.options.get(name, {})) for name in _pass_steps(spec)
    ]
    return reduce(_time_step, configured, (a, {}))


def _merged_changes(meta: Mapping[str, Any]) -> dict[int, list[str]]:
    """Union the per-pass change maps into ``{record index: sorted field names}``."""
    per_pass = (meta.get("changes") or {}).values()
    indices = sorted({i for changes in per_pass for i in changes})
    return {
        i: sorted({f for changes in per_pass for f in changes.get(i, ())})
        for i in indices
    }


def records_artifact(records: Sequence[Record], source: str | None = None) -> Artifact:
    payload: dict[str, Any] = {"type": "records", "records": list(records)}
    if source:
        payload["source_path"] = source
    return Artifact(payload=payload, meta={"metrics": {}})


def input_artifact(path: str | Path) -> Artifact:
    """Load a JSON Lines file of records."""
    return Artifact(payload=io_jsonl.read(path), meta={"metrics": {}, "input": str(path)})


def run_artifact(a: Artifact, spec: PipelineSpec) -> tuple[list[Record], dict[str, Any]]:
    result, timings = run_passes(spec, a)
    meta = result.meta or {}
    report = {
        "changes": _merged_changes(meta),
        "metrics": dict(meta.get("metrics") or {}),
        "timings": timings,
    }
    return list(result.payload.get("records") or []), report


def run_records(
    records: Sequence[Record], spec: PipelineSpec | None = None
) -> tuple[list[Record], dict[str, Any]]:
    """Guess punctuation for a batch of records.

    Returns the transformed records and a report whose ``changes`` maps each
    changed record's index to the names of its changed fields.
    """
    return run_artifact(records_artifact(records), spec or PipelineSpec())

