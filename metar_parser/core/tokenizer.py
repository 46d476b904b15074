"""Whitespace tokenizer for raw METAR text.

WHY: Every later stage works on individual groups. Keeping the original
offset of each group lets decoders point at the exact spot when a group
is malformed.

RULES:
- Split on runs of whitespace; no case-folding, no other trimming
- Empty or whitespace-only input → empty list
- None input is a programmer error → TypeError
"""

from __future__ import annotations

import re
from typing import List

from metar_parser.core.tokens import RawToken

_GROUP_RE = re.compile(r"\S+")


def tokenize(report_text: str) -> List[RawToken]:
    """Split a report into RawTokens in source order."""
    if report_text is None:
        raise TypeError("report_text must be a string, not None")
    if not isinstance(report_text, str):
        raise TypeError(
            "report_text must be a string, not {}".format(type(report_text).__name__)
        )
    return [
        RawToken(text=match.group(0), offset=match.start())
        for match in _GROUP_RE.finditer(report_text)
    ]
