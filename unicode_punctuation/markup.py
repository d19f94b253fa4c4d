"""Protection of wiki-style markup and link targets during punctuation guessing.

Annotations and edit notes may contain apostrophe markup (``'''bold'''``,
``''italic''``) and bracketed links (``[target]`` or ``[target|label]``).
The punctuation rules would turn those apostrophes into quotes and the
hyphens of a URL into Unicode hyphens, so before guessing:

- bold and italic markers become private-use sentinel characters,
- link targets become their Base64 encoding (the label stays readable and
  still receives punctuation guessing),

and afterwards both are restored. ``restore(protect(s).text) == s`` for any
``s`` that does not already contain the sentinel characters.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
from dataclasses import dataclass
from typing import NamedTuple, Tuple

from unicode_punctuation.punctuation import DEFAULT_RULES
from unicode_punctuation.rules import RuleSet, TemplateRule, TransformRule, apply_rules

logger = logging.getLogger(__name__)

# Private use area code points: non-word characters that no rule matches.
BOLD_SENTINEL = "\ue000"
ITALIC_SENTINEL = "\ue001"

BOLD_MARKER = "'''"
ITALIC_MARKER = "''"

LINK_PATTERN = re.compile(r"\[(.+?)(\|.+?)?\]")
ENCODED_LINK_PATTERN = re.compile(r"\[([A-Za-z0-9+/=]+)(\|.+?)?\]")


@dataclass(frozen=True)
class EncodedSpan:
    """One protected occurrence: its token in the protected text and the original."""

    kind: str
    token: str
    original: str


class Protected(NamedTuple):
    text: str
    spans: Tuple[EncodedSpan, ...]


def encode_target(target: str) -> str:
    return base64.b64encode(target.encode("utf-8")).decode("ascii")


def decode_target(encoded: str) -> str:
    """Inverse of ``encode_target``; raises ``ValueError`` for foreign input."""
    try:
        return base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise ValueError(f"not an encoded link target: {encoded!r}") from exc


def _encode_link(match: re.Match[str]) -> str:
    target, label = match.group(1), match.group(2) or ""
    return f"[{encode_target(target)}{label}]"


def _decode_link(match: re.Match[str]) -> str:
    encoded, label = match.group(1), match.group(2) or ""
    try:
        target = decode_target(encoded)
    except ValueError:
        logger.debug("leaving undecodable link target %r", encoded)
        return match.group(0)
    return f"[{target}{label}]"


PROTECT_RULES = RuleSet.of(
    TemplateRule("protect_bold", re.compile(BOLD_MARKER), BOLD_SENTINEL, "bold markers"),
    TemplateRule("protect_italic", re.compile(ITALIC_MARKER), ITALIC_SENTINEL, "italic markers"),
    TransformRule("protect_link", LINK_PATTERN, _encode_link, "Base64 encode link targets"),
)

RESTORE_RULES = RuleSet.of(
    TransformRule("restore_link", ENCODED_LINK_PATTERN, _decode_link, "decode Base64 link targets"),
    TemplateRule("restore_italic", re.compile(ITALIC_SENTINEL), ITALIC_MARKER, "italic markers"),
    TemplateRule("restore_bold", re.compile(BOLD_SENTINEL), BOLD_MARKER, "bold markers"),
)

_SPAN_SCAN = re.compile(
    "|".join((BOLD_SENTINEL, ITALIC_SENTINEL, ENCODED_LINK_PATTERN.pattern))
)


def _span(match: re.Match[str]) -> EncodedSpan:
    token = match.group(0)
    if token == BOLD_SENTINEL:
        return EncodedSpan("bold", token, BOLD_MARKER)
    if token == ITALIC_SENTINEL:
        return EncodedSpan("italic", token, ITALIC_MARKER)
    encoded = match.group(1)
    try:
        return EncodedSpan("link", encoded, decode_target(encoded))
    except ValueError:
        return EncodedSpan("link", encoded, encoded)


def protect(text: str) -> Protected:
    """Encode markup markers and link targets so no punctuation rule touches them."""
    if not text:
        return Protected(text, ())
    protected = apply_rules(text, PROTECT_RULES)
    spans = tuple(_span(m) for m in _SPAN_SCAN.finditer(protected))
    return Protected(protected, spans)


def restore(text: str) -> str:
    """Decode what ``protect`` encoded."""
    return apply_rules(text, RESTORE_RULES)


def guard(text: str, rules: RuleSet) -> str:
    """Apply ``rules`` to ``text`` while keeping markup and link targets intact."""
    if not text:
        return text
    return restore(apply_rules(protect(text).text, rules))


def guess_punctuation_preserving_markup(text: str, rules: RuleSet = DEFAULT_RULES) -> str:
    """Guess Unicode punctuation for free text with embedded markup and links."""
    return guard(text, rules)
