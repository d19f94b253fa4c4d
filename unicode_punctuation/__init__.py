"""Guess Unicode punctuation for titles and free-text metadata."""

from unicode_punctuation.markup import guess_punctuation_preserving_markup, protect, restore
from unicode_punctuation.punctuation import DEFAULT_RULES, guess_punctuation
from unicode_punctuation.rules import RuleSet, TemplateRule, TransformRule, apply_rules

# Auto-register passes on package import
from . import passes  # noqa: F401,E402

__all__ = [
    "DEFAULT_RULES",
    "RuleSet",
    "TemplateRule",
    "TransformRule",
    "apply_rules",
    "guess_punctuation",
    "guess_punctuation_preserving_markup",
    "protect",
    "restore",
]
