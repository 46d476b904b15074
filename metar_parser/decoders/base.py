"""Shared decoder contract and helpers.

WHY: Every field decoder has the same shape so the assembler can drive
them generically: it receives the tokens of its own group (possibly
none), the shared error sink, and the parse context, and returns a
value or None.

HOW: FieldDecoder is the callable type; DecoderEntry binds a decoder to
the TokenType it reads and the Report field it fills. first_token()
covers the common "exactly one group expected" case.

RULES:
- A decoder never raises for malformed text
- On failure it appends one descriptive message and returns None
- Appending to the sink is its only side effect
- An optional group that is simply absent returns None without an error
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from metar_parser.core.context import ParseContext
from metar_parser.core.errors import ErrorSink
from metar_parser.core.tokens import RawToken, TokenType

FieldDecoder = Callable[[Sequence[RawToken], ErrorSink, ParseContext], Optional[Any]]


@dataclass(frozen=True)
class DecoderEntry:
    """One step of the decode sequence.

    Attributes:
        field_name: Report attribute the decoder fills.
        token_type: Group the decoder reads.
        decoder: The decoding function.
    """

    field_name: str
    token_type: TokenType
    decoder: FieldDecoder


def first_token(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    label: str,
) -> Optional[RawToken]:
    """Return the first token of a single-valued group.

    Extra tokens are reported and ignored.
    """
    if not tokens:
        return None
    for extra in tokens[1:]:
        errors.add("Unexpected additional {} group {} ignored".format(label, extra.describe()))
    return tokens[0]


def parse_signed(value: str) -> int:
    """Parse a METAR signed integer where a leading 'M' means minus."""
    if value.startswith("M"):
        return -int(value[1:])
    return int(value)
