from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Protocol, runtime_checkable


@dataclass(frozen=True)
class Artifact:
    """Immutable carrier of a text or record batch plus metadata between passes."""

    payload: Any
    meta: Dict[str, Any] | None = None

    def with_payload(self, payload: Any, meta: Dict[str, Any] | None = None) -> "Artifact":
        """Return a new artifact; ``meta`` defaults to a copy of the current one."""
        return Artifact(payload=payload, meta=dict(self.meta or {}) if meta is None else meta)


@runtime_checkable
class Pass(Protocol):
    name: str

    def __call__(self, a: Artifact) -> Artifact:
        """Execute the pass."""
        ...


_REGISTRY: Mapping[str, Pass] = MappingProxyType({})


def register(p: Pass) -> Pass:
    """Register a pass by name; re-registering the same name replaces it."""
    global _REGISTRY
    _REGISTRY = MappingProxyType({**dict(_REGISTRY), p.name: p})
    return p


def registry() -> Dict[str, Pass]:
    """Shallow copy of the registry for inspection/testing."""
    return dict(_REGISTRY)
