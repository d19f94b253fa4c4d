from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Sequence, cast

from unicode_punctuation.framework import Artifact
from unicode_punctuation.records import Record, is_record_batch, transform_fields

logger = logging.getLogger(__name__)


def _transform_records(
    records: Sequence[Record],
    fields: Sequence[str],
    transform: Callable[[str], str],
) -> tuple[List[Record], Dict[int, List[str]]]:
    results = [transform_fields(r, fields, transform) for r in records]
    changes = {i: changed for i, (_, changed) in enumerate(results) if changed}
    return [r for r, _ in results], changes


def apply_to_payload(
    a: Artifact,
    name: str,
    fields: Sequence[str],
    transform: Callable[[str], str],
) -> Artifact:
    """Run ``transform`` over a string payload or the ``fields`` of a record batch.

    Changed record fields are reported under ``meta["changes"][name]`` keyed by
    record index; counts go to ``meta["metrics"][name]``.
    """
    payload = a.payload
    meta = dict(a.meta or {})
    metrics = dict(meta.get("metrics") or {})

    if isinstance(payload, str):
        updated = transform(payload) if payload else payload
        metrics[name] = {"changed": updated != payload}
        return a.with_payload(updated, {**meta, "metrics": metrics})

    if not is_record_batch(payload):
        return a

    batch = cast(Dict[str, Any], payload)
    records, changes = _transform_records(batch.get("records") or [], fields, transform)
    metrics[name] = {
        "records": len(records),
        "changed_records": len(changes),
        "changed_fields": sum(len(c) for c in changes.values()),
    }
    logger.debug("%s: %s", name, metrics[name])
    all_changes = {**dict(meta.get("changes") or {}), name: changes}
    return a.with_payload(
        {**batch, "records": records},
        {**meta, "metrics": metrics, "changes": all_changes},
    )
