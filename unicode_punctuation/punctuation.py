"""Canonical punctuation-guessing rules.

ASCII quotes, apostrophes, hyphens and dots are ambiguous; the rules below
resolve them from context alone. Order matters: specific patterns run first
and the catch-all rules (``apostrophe``, ``hyphen``) last.

Not attempted: em dash, minus sign, figure dash. There is not enough context
in a title to tell them apart from hyphens and en dashes.
"""

from __future__ import annotations

import re

from unicode_punctuation.rules import RuleSet, TemplateRule, apply_rules

# ---------------------------------------------------------------------------
# Characters
# ---------------------------------------------------------------------------

LEFT_DOUBLE_QUOTE = "\u201c"  # “
RIGHT_DOUBLE_QUOTE = "\u201d"  # ”
LEFT_SINGLE_QUOTE = "\u2018"  # ‘
RIGHT_SINGLE_QUOTE = "\u2019"  # ’ (also the apostrophe)
PRIME = "\u2032"  # ′
DOUBLE_PRIME = "\u2033"  # ″
ELLIPSIS = "\u2026"  # …
EN_DASH = "\u2013"  # –
HYPHEN = "\u2010"  # ‐ (not the ASCII hyphen-minus)

# ---------------------------------------------------------------------------
# Patterns & Constants
# ---------------------------------------------------------------------------

# Zero-width boundaries: a non-word character or the edge of the string.
# Patterns are compiled with re.ASCII, so only [A-Za-z0-9_] are word
# characters and only [0-9] are digits.
_OPEN = r"(?<!\w)"
_CLOSE = r"(?!\w)"

_YEAR = r"(\d{4})"
_MONTH = r"(0[1-9]|1[0-2])"
_DAY = r"(0[1-9]|[12]\d|3[01])"

DEFAULT_RULES = RuleSet.of(
    TemplateRule(
        "double_quotes",
        re.compile(_OPEN + r'"(.+?)"' + _CLOSE, re.ASCII),
        LEFT_DOUBLE_QUOTE + r"\g<1>" + RIGHT_DOUBLE_QUOTE,
        "double quoted text enclosed by non-word characters or the title edges",
    ),
    TemplateRule(
        "n_contraction",
        re.compile(_OPEN + r"'n'" + _CLOSE, re.ASCII),
        RIGHT_SINGLE_QUOTE + "n" + RIGHT_SINGLE_QUOTE,
        "'n' as in rock 'n' roll, not a quoted n",
    ),
    TemplateRule(
        "single_quotes",
        re.compile(_OPEN + r"'(.+?)'" + _CLOSE, re.ASCII),
        LEFT_SINGLE_QUOTE + r"\g<1>" + RIGHT_SINGLE_QUOTE,
        "single quoted text enclosed by non-word characters or the title edges",
    ),
    TemplateRule(
        "double_prime",
        re.compile(r'(\d+)"', re.ASCII),
        r"\g<1>" + DOUBLE_PRIME,
        'double primes, e.g. 12" becomes 12″',
    ),
    TemplateRule(
        "single_prime",
        re.compile(r"(\d+)'(\d+)", re.ASCII),
        r"\g<1>" + PRIME + r"\g<2>",
        "single primes between digits, e.g. 3′42″ but not 70’s",
    ),
    TemplateRule(
        "apostrophe",
        re.compile(r"'", re.ASCII),
        RIGHT_SINGLE_QUOTE,
        "every remaining apostrophe",
    ),
    TemplateRule(
        "ellipsis",
        re.compile(r"(?<!\.)\.{3}(?!\.)", re.ASCII),
        ELLIPSIS,
        "exactly three dots become a horizontal ellipsis",
    ),
    TemplateRule(
        "separator_dash",
        re.compile(r" - ", re.ASCII),
        " " + EN_DASH + " ",
        "spaced hyphen used as a separator becomes a spaced en dash",
    ),
    TemplateRule(
        "iso_date",
        re.compile(_OPEN + _YEAR + "-" + _MONTH + "-" + _DAY + _CLOSE, re.ASCII),
        r"\g<1>" + HYPHEN + r"\g<2>" + HYPHEN + r"\g<3>",
        "hyphens of ISO 8601 dates, e.g. 1987‐07‐30",
    ),
    TemplateRule(
        "iso_partial_date",
        re.compile(_OPEN + _YEAR + "-" + _MONTH + _CLOSE, re.ASCII),
        r"\g<1>" + HYPHEN + r"\g<2>",
        "hyphen of ISO 8601 partial dates, e.g. 2016‐04",
    ),
    TemplateRule(
        "range_dash",
        re.compile(r"(\d+)-(\d+)", re.ASCII),
        r"\g<1>" + EN_DASH + r"\g<2>",
        "en dash for numeric ranges meaning 'to', e.g. 1965–1972",
    ),
    TemplateRule(
        "hyphen",
        re.compile(r"-", re.ASCII),
        HYPHEN,
        "every remaining hyphen",
    ),
)


def guess_punctuation(text: str, rules: RuleSet = DEFAULT_RULES) -> str:
    """Replace ASCII punctuation in ``text`` by its likely Unicode counterpart."""
    return apply_rules(text, rules)
