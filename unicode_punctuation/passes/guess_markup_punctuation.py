"""Punctuation guessing for free-text fields that may carry wiki markup and links."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from unicode_punctuation.framework import Artifact, register
from unicode_punctuation.markup import guess_punctuation_preserving_markup
from unicode_punctuation.passes._fields import apply_to_payload
from unicode_punctuation.punctuation import DEFAULT_RULES
from unicode_punctuation.rules import RuleSet

FREE_TEXT_FIELDS = ["annotation", "edit_note"]


@dataclass
class _GuessMarkupPunctuationPass:
    name: str = field(default="guess_markup_punctuation", init=False)
    fields: List[str] = field(default_factory=lambda: list(FREE_TEXT_FIELDS))
    rules: RuleSet = DEFAULT_RULES

    def __call__(self, a: Artifact) -> Artifact:
        return apply_to_payload(
            a,
            self.name,
            self.fields,
            lambda text: guess_punctuation_preserving_markup(text, self.rules),
        )


guess_markup_punctuation = register(_GuessMarkupPunctuationPass())
