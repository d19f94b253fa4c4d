from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from unicode_punctuation.records import Record


def _parse_line(number: int, line: str) -> Record:
    try:
        row = json.loads(line)
    except json.JSONDecodeError as exc:
        raise ValueError(f"line {number}: invalid JSON ({exc.msg})") from exc
    if not isinstance(row, dict):
        raise ValueError(f"line {number}: expected a JSON object, got {type(row).__name__}")
    return row


def parse_lines(lines: Iterable[str]) -> Iterator[Record]:
    """Yield one record per non-blank JSON Lines row."""
    return (
        _parse_line(number, line)
        for number, line in enumerate(lines, start=1)
        if line.strip()
    )


def read(path: str | Path) -> dict[str, Any]:
    """Load a JSON Lines file into a ``records`` payload."""
    p = Path(path)
    with p.open(encoding="utf-8") as fh:
        records = list(parse_lines(fh))
    return {"type": "records", "source_path": str(p.resolve()), "records": records}
