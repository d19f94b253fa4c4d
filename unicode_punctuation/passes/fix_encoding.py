"""Optional mojibake repair before punctuation guessing.

Metadata pasted from other sites often arrives double-encoded
(``BeyoncÃ©`` instead of ``Beyoncé``). ``ftfy`` repairs that; quotes are
left curly or straight as found so the guessing rules still decide them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import ftfy

from unicode_punctuation.framework import Artifact, register
from unicode_punctuation.passes._fields import apply_to_payload
from unicode_punctuation.passes.guess_markup_punctuation import FREE_TEXT_FIELDS
from unicode_punctuation.passes.guess_punctuation import TITLE_FIELDS


def fix_text(text: str) -> str:
    return ftfy.fix_text(text, uncurl_quotes=False)


@dataclass
class _FixEncodingPass:
    name: str = field(default="fix_encoding", init=False)
    enabled: bool = False
    fields: List[str] = field(default_factory=lambda: [*TITLE_FIELDS, *FREE_TEXT_FIELDS])

    def __call__(self, a: Artifact) -> Artifact:
        if not self.enabled:
            return a
        return apply_to_payload(a, self.name, self.fields, fix_text)


fix_encoding = register(_FixEncodingPass())
