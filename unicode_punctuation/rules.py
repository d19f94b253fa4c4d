"""Ordered substitution rules and the engine that applies them.

A rule pairs a compiled regex with a replacement. Two kinds exist:

- ``TemplateRule``: the replacement is a literal template that may reference
  captured groups (``\\g<1>``).
- ``TransformRule``: the replacement is a pure function of the match.

A ``RuleSet`` is an ordered, immutable sequence of rules. Applying it runs
every rule globally, in order, each on the output of the previous one::

    rules = RuleSet.of(
        TemplateRule("ellipsis", re.compile(r"\\.{3}"), "…"),
        TemplateRule("dash", re.compile(r" - "), " – "),
    )
    rules.apply("Wait... what - really")

Rules never raise on unmatched input; text without a match passes through.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import reduce
from typing import Callable, Iterator, Tuple, Union

logger = logging.getLogger(__name__)

PREVIEW_LEN = 100


def _preview(s: str, n: int = PREVIEW_LEN) -> str:
    """Return a safe preview slice for debug logs."""
    return repr(s[:n])


@dataclass(frozen=True)
class TemplateRule:
    """Substitution whose replacement is a group-referencing template.

    Attributes:
        name: Identifier used in logs and ``RuleSet.names()``
        pattern: Compiled regex; may capture groups and use lookaround
        template: Replacement template in ``re.sub`` syntax
        description: Human-readable explanation (shown by ``cli rules``)
    """

    name: str
    pattern: re.Pattern[str]
    template: str
    description: str = ""

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.template, text)


@dataclass(frozen=True)
class TransformRule:
    """Substitution whose replacement is computed from the match."""

    name: str
    pattern: re.Pattern[str]
    transform: Callable[[re.Match[str]], str]
    description: str = ""

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.transform, text)


SubstitutionRule = Union[TemplateRule, TransformRule]


def _apply_one(text: str, rule: SubstitutionRule) -> str:
    updated = rule.apply(text)
    if updated != text:
        logger.debug("rule %s: %s", rule.name, _preview(updated))
    return updated


@dataclass(frozen=True)
class RuleSet:
    """Ordered sequence of substitution rules; later rules see earlier output."""

    rules: Tuple[SubstitutionRule, ...] = ()

    @classmethod
    def of(cls, *rules: SubstitutionRule) -> "RuleSet":
        return cls(tuple(rules))

    def __iter__(self) -> Iterator[SubstitutionRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __add__(self, other: "RuleSet") -> "RuleSet":
        if not isinstance(other, RuleSet):
            return NotImplemented
        return RuleSet(self.rules + other.rules)

    def names(self) -> Tuple[str, ...]:
        return tuple(rule.name for rule in self.rules)

    def apply(self, text: str) -> str:
        return apply_rules(text, self)


def apply_rules(text: str, rules: RuleSet) -> str:
    """Apply ``rules`` to ``text`` in order.

    Empty input is returned as-is without running any rule.
    """
    if not text:
        return text
    return reduce(_apply_one, rules, text)
