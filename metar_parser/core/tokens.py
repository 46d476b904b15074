"""Token-level data structures shared by the tokenizer, classifier, and decoders.

WHY: A METAR is a flat, whitespace-delimited string. Decoders need each
group's exact text plus where it came from (for error messages), and
they need the groups sorted by meaning, not by position.

HOW: Three structures form the token layer:
  RawToken     : one whitespace-delimited substring and its start offset
  TokenType    : the closed set of semantic group kinds
  GroupedTokens: read-only mapping of TokenType → tokens in source order

RULES:
- RawToken is immutable and created only by the tokenizer
- Every token is classified into exactly one TokenType (UNKNOWN is the fallback)
- GroupedTokens is built once per parse and never mutated afterwards
- An absent type maps to an empty tuple, never to None
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Sequence, Tuple


@dataclass(frozen=True)
class RawToken:
    """One whitespace-delimited group of the report, verbatim."""

    text: str
    offset: int

    def describe(self) -> str:
        """Quote the token with its position, for error messages."""
        return "'{}' at position {}".format(self.text, self.offset)


class TokenType(Enum):
    """Semantic kind of a METAR group."""

    REPORT_TYPE = "report_type"
    AIRPORT = "airport"
    OBSERVATION_DAY_TIME = "observation_day_time"
    MODIFIER = "modifier"
    SURFACE_WIND = "surface_wind"
    PREVAILING_VISIBILITY = "prevailing_visibility"
    RUNWAY_VISUAL_RANGE = "runway_visual_range"
    PRESENT_WEATHER = "present_weather"
    CLOUD_LAYER = "cloud_layer"
    TEMPERATURE = "temperature"
    ALTIMETER_SETTING = "altimeter_setting"
    RECENT_WEATHER = "recent_weather"
    WIND_SHEAR = "wind_shear"
    RUNWAY_CONDITION = "runway_condition"
    TREND = "trend"
    REMARKS = "remarks"
    UNKNOWN = "unknown"


class GroupedTokens:
    """Read-only mapping of TokenType to the tokens of that type.

    WHY: Every decoder reads exactly one group. Keying by the closed
    TokenType enum and freezing the mapping means decoders can never
    see (or cause) changes made by another decoder.

    HOW: The constructor copies each sequence into a tuple and drops empty
    groups, then wraps the dict in a MappingProxyType.

    RULES:
    - group(t) returns () for types with no tokens
    - Iteration yields only types that have at least one token
    - Token order within a group is source order
    """

    def __init__(self, groups: Mapping[TokenType, Sequence[RawToken]]) -> None:
        frozen: Dict[TokenType, Tuple[RawToken, ...]] = {
            token_type: tuple(tokens)
            for token_type, tokens in groups.items()
            if tokens
        }
        self._groups = MappingProxyType(frozen)

    def group(self, token_type: TokenType) -> Tuple[RawToken, ...]:
        return self._groups.get(token_type, ())

    def texts(self, token_type: TokenType) -> Tuple[str, ...]:
        return tuple(token.text for token in self.group(token_type))

    def has_recognized_groups(self) -> bool:
        """True when at least one token was classified as something other than UNKNOWN."""
        return any(token_type is not TokenType.UNKNOWN for token_type in self._groups)

    def __contains__(self, token_type: object) -> bool:
        return token_type in self._groups

    def __iter__(self) -> Iterator[TokenType]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        body = ", ".join(
            "{}={}".format(token_type.name, list(self.texts(token_type)))
            for token_type in self._groups
        )
        return "GroupedTokens({})".format(body)
