"""Token classification: route every raw token to exactly one TokenType.

WHY: A METAR is positional only in its header (report type, airport,
time). Everything after it is recognised by shape: "24015KT" is wind,
"BKN030" is a cloud layer, "R24/P1500" is an RVR group. Decoders should
only ever see the tokens of their own group.

HOW: A single left-to-right pass. Two section markers switch modes:
after NOSIG / BECMG / TEMPO every token belongs to the trend, after RMK
every token belongs to the remarks. Otherwise an ordered rule table is
tried and the first matching rule wins. Rules are predicates over the
token text plus a small cursor (types seen so far, previous type, next
token text) so that positional rules like "airport comes first" and
"a dddVddd sector follows the wind group" stay pure functions.

RULES:
- First match wins; header rules (report type, modifier, airport,
  observation time) are checked before the generic shape rules
- The airport is taken once, before any non-header group
- Observation time: DDHHMMZ / HHMMZ anywhere until one is seen, or any
  token ending in "Z" (or six digits) directly after the airport
- Shapes are loose on purpose; decoders reject malformed values
- "//" and "///" are present weather not reported; a temperature group
  needs at least one numeric side unless it is the whole "/////"
- Unmatched tokens go to UNKNOWN, they are not discarded
- Repeated groups keep their source order
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, List, Optional, Sequence, Set, Tuple

from metar_parser.config import (
    MODIFIERS,
    REMARKS_MARKER,
    REPORT_TYPES,
    TREND_MARKERS,
)
from metar_parser.core import patterns
from metar_parser.core.tokens import GroupedTokens, RawToken, TokenType

logger = logging.getLogger(__name__)

# Types that may precede the airport.
_HEADER_TYPES: FrozenSet[TokenType] = frozenset({TokenType.REPORT_TYPE, TokenType.MODIFIER})


@dataclass
class _Cursor:
    """Classification state visible to the rules for one token."""

    seen: Set[TokenType] = field(default_factory=set)
    previous: Optional[TokenType] = None
    next_text: Optional[str] = None


Rule = Callable[[str, _Cursor], bool]


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

def _is_report_type(text: str, cursor: _Cursor) -> bool:
    return text in REPORT_TYPES and TokenType.AIRPORT not in cursor.seen


def _is_modifier(text: str, cursor: _Cursor) -> bool:
    return text in MODIFIERS


def _is_airport(text: str, cursor: _Cursor) -> bool:
    return (
        TokenType.AIRPORT not in cursor.seen
        and cursor.seen <= _HEADER_TYPES
        and patterns.AIRPORT_SHAPE_RE.fullmatch(text) is not None
    )


def _is_observation_day_time(text: str, cursor: _Cursor) -> bool:
    if TokenType.OBSERVATION_DAY_TIME in cursor.seen:
        return False
    if patterns.DAY_TIME_SHAPE_RE.fullmatch(text):
        return True
    # Directly after the airport, anything time-like is handed to the
    # time decoder so it can report what is wrong with it.
    if cursor.previous is TokenType.AIRPORT:
        return (text.endswith("Z") and 3 <= len(text) <= 8) or (len(text) == 6 and text.isdigit())
    return False


def _is_surface_wind(text: str, cursor: _Cursor) -> bool:
    if patterns.WIND_SHAPE_RE.fullmatch(text):
        return True
    return (
        cursor.previous is TokenType.SURFACE_WIND
        and patterns.WIND_SECTOR_RE.fullmatch(text) is not None
    )


def _is_visibility(text: str, cursor: _Cursor) -> bool:
    if text == "CAVOK":
        return True
    if patterns.VISIBILITY_METRES_RE.fullmatch(text):
        return True
    if patterns.VISIBILITY_SM_SHAPE_RE.fullmatch(text):
        return True
    # Whole part of a mixed fraction: "1 1/2SM"
    return (
        patterns.VISIBILITY_WHOLE_RE.fullmatch(text) is not None
        and cursor.next_text is not None
        and patterns.VISIBILITY_FRACTION_SM_RE.fullmatch(cursor.next_text) is not None
    )


def _is_runway_condition(text: str, cursor: _Cursor) -> bool:
    return bool(
        patterns.RUNWAY_CONDITION_RE.fullmatch(text)
        or patterns.RUNWAY_CONDITION_LEGACY_RE.fullmatch(text)
        or patterns.AERODROME_CLOSED_RE.fullmatch(text)
    )


def _is_runway_visual_range(text: str, cursor: _Cursor) -> bool:
    return patterns.RVR_RE.fullmatch(text) is not None


def _is_wind_shear(text: str, cursor: _Cursor) -> bool:
    if text == patterns.WIND_SHEAR_MARKER:
        return True
    if cursor.previous is not TokenType.WIND_SHEAR:
        return False
    return text in ("ALL", "RWY") or patterns.WIND_SHEAR_RUNWAY_RE.fullmatch(text) is not None


def _is_recent_weather(text: str, cursor: _Cursor) -> bool:
    match = patterns.RECENT_WEATHER_RE.fullmatch(text)
    return match is not None and bool(match.group("descriptor") or match.group("phenomena"))


def _is_present_weather(text: str, cursor: _Cursor) -> bool:
    if patterns.WEATHER_NOT_REPORTED_RE.fullmatch(text):
        return True
    match = patterns.WEATHER_RE.fullmatch(text)
    return match is not None and bool(match.group("descriptor") or match.group("phenomena"))


def _is_cloud_layer(text: str, cursor: _Cursor) -> bool:
    return patterns.CLOUD_SHAPE_RE.fullmatch(text) is not None


def _is_temperature(text: str, cursor: _Cursor) -> bool:
    return patterns.TEMPERATURE_SHAPE_RE.fullmatch(text) is not None


def _is_altimeter_setting(text: str, cursor: _Cursor) -> bool:
    return patterns.ALTIMETER_SHAPE_RE.fullmatch(text) is not None


_REPORT_RULES: Tuple[Tuple[TokenType, Rule], ...] = (
    (TokenType.REPORT_TYPE, _is_report_type),
    (TokenType.MODIFIER, _is_modifier),
    (TokenType.AIRPORT, _is_airport),
    (TokenType.OBSERVATION_DAY_TIME, _is_observation_day_time),
    (TokenType.SURFACE_WIND, _is_surface_wind),
    (TokenType.PREVAILING_VISIBILITY, _is_visibility),
    (TokenType.RUNWAY_CONDITION, _is_runway_condition),
    (TokenType.RUNWAY_VISUAL_RANGE, _is_runway_visual_range),
    (TokenType.WIND_SHEAR, _is_wind_shear),
    (TokenType.RECENT_WEATHER, _is_recent_weather),
    (TokenType.PRESENT_WEATHER, _is_present_weather),
    (TokenType.CLOUD_LAYER, _is_cloud_layer),
    (TokenType.TEMPERATURE, _is_temperature),
    (TokenType.ALTIMETER_SETTING, _is_altimeter_setting),
)

# Groups that may appear inside a BECMG / TEMPO change.
_CHANGE_RULES: Tuple[Tuple[TokenType, Rule], ...] = (
    (TokenType.SURFACE_WIND, _is_surface_wind),
    (TokenType.PREVAILING_VISIBILITY, _is_visibility),
    (TokenType.PRESENT_WEATHER, _is_present_weather),
    (TokenType.CLOUD_LAYER, _is_cloud_layer),
)


def _match(
    text: str,
    cursor: _Cursor,
    rules: Sequence[Tuple[TokenType, Rule]],
) -> TokenType:
    for token_type, rule in rules:
        if rule(text, cursor):
            return token_type
    return TokenType.UNKNOWN


def _classify_with(
    tokens: Sequence[RawToken],
    rules: Sequence[Tuple[TokenType, Rule]],
) -> Dict[TokenType, List[RawToken]]:
    groups: Dict[TokenType, List[RawToken]] = {}
    cursor = _Cursor()
    for index, token in enumerate(tokens):
        cursor.next_text = tokens[index + 1].text if index + 1 < len(tokens) else None
        token_type = _match(token.text, cursor, rules)
        if token_type is TokenType.UNKNOWN:
            logger.debug("Unrecognized METAR group %s", token.describe())
        groups.setdefault(token_type, []).append(token)
        cursor.seen.add(token_type)
        cursor.previous = token_type
    return groups


def classify(tokens: Sequence[RawToken]) -> GroupedTokens:
    """Classify report tokens into semantic groups.

    WHY: Decoders each need only their own group, in source order.

    HOW: Splits the token sequence at the first trend marker and at the
    remarks marker. The leading part goes through the report rule table;
    the trend part and the remarks part are taken whole.

    RULES:
    - RMK and everything after it → REMARKS
    - First of NOSIG / BECMG / TEMPO and everything after it (up to RMK) → TREND
    - The rest → first matching rule, else UNKNOWN

    Args:
        tokens: RawTokens from tokenize(), in source order.

    Returns:
        GroupedTokens with one entry per type that has at least one token.
    """
    body: List[RawToken] = []
    trend: List[RawToken] = []
    remarks: List[RawToken] = []

    for token in tokens:
        if remarks or token.text == REMARKS_MARKER:
            remarks.append(token)
        elif trend or token.text in TREND_MARKERS:
            trend.append(token)
        else:
            body.append(token)

    groups = _classify_with(body, _REPORT_RULES)
    if trend:
        groups[TokenType.TREND] = trend
    if remarks:
        groups[TokenType.REMARKS] = remarks
    return GroupedTokens(groups)


def classify_change_groups(tokens: Sequence[RawToken]) -> GroupedTokens:
    """Classify the weather groups of one trend change (BECMG / TEMPO body).

    Only wind, visibility, present weather, and clouds can appear there;
    NSW and FM/TL/AT time groups are handled by the trend decoder and
    should be removed before calling this.
    """
    return GroupedTokens(_classify_with(tokens, _CHANGE_RULES))
