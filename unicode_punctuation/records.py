from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Tuple

Record = Dict[str, Any]


def _transform_value(value: Any, transform: Callable[[str], str]) -> Any:
    """Return ``value`` transformed when it is a non-empty string or list of strings."""
    if isinstance(value, str):
        return transform(value) if value else value
    if isinstance(value, list):
        return [_transform_value(v, transform) if isinstance(v, str) else v for v in value]
    return value


def transform_fields(
    record: Record,
    fields: Iterable[str],
    transform: Callable[[str], str],
) -> Tuple[Record, List[str]]:
    """Return a new record with ``fields`` transformed and the names of changed fields.

    Missing, empty and non-text fields are skipped. A list field (e.g. track
    titles) is transformed element-wise and reported once.
    """
    if isinstance(fields, str):
        fields = [fields]
    wanted = [f for f in fields if f in record]
    updated = {f: _transform_value(record[f], transform) for f in wanted}
    changed = [f for f in wanted if updated[f] != record[f]]
    return {**record, **{f: updated[f] for f in changed}}, changed


def is_record_batch(payload: Any) -> bool:
    return isinstance(payload, dict) and payload.get("type") == "records"
