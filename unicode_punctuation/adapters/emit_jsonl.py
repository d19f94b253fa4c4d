from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from unicode_punctuation.records import Record


def dumps(records: Iterable[Record]) -> str:
    """Serialize records as JSON Lines, keeping non-ASCII punctuation readable."""
    return "".join(f"{json.dumps(r, ensure_ascii=False)}\n" for r in records)


def write(records: Iterable[Record], path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(dumps(records), encoding="utf-8")
    return out
