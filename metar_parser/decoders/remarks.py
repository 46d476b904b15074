"""Remarks and unrecognized-group decoders.

RULES:
- Remarks are the verbatim texts after RMK joined by single spaces;
  a bare RMK gives "" (present but empty), no RMK gives None
- Unrecognized groups are kept verbatim and each one is reported
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from metar_parser.config import REMARKS_MARKER
from metar_parser.core.context import ParseContext
from metar_parser.core.errors import ErrorSink
from metar_parser.core.tokens import RawToken


def decode_remarks(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    context: ParseContext,
) -> Optional[str]:
    if not tokens:
        return None
    if tokens[0].text == REMARKS_MARKER:
        tokens = tokens[1:]
    return " ".join(token.text for token in tokens)


def decode_unrecognized(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    context: ParseContext,
) -> Optional[Tuple[str, ...]]:
    if not tokens:
        return None
    for token in tokens:
        errors.add("Unrecognized group {}".format(token.describe()))
    return tuple(token.text for token in tokens)
