from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from unicode_punctuation.framework import Artifact, register
from unicode_punctuation.passes._fields import apply_to_payload
from unicode_punctuation.punctuation import DEFAULT_RULES, guess_punctuation as _guess
from unicode_punctuation.rules import RuleSet

TITLE_FIELDS = ["title", "tracks", "media"]


@dataclass
class _GuessPunctuationPass:
    name: str = field(default="guess_punctuation", init=False)
    fields: List[str] = field(default_factory=lambda: list(TITLE_FIELDS))
    rules: RuleSet = DEFAULT_RULES

    def __call__(self, a: Artifact) -> Artifact:
        return apply_to_payload(a, self.name, self.fields, lambda text: _guess(text, self.rules))


guess_punctuation = register(_GuessPunctuationPass())
