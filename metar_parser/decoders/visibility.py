"""Prevailing visibility and runway visual range (RVR) decoders.

WHY: Visibility comes in three dialects: metric ("0800", "9999NDV",
"1500SW"), statute miles ("10SM", "1 1/2SM", "M1/4SM"), and CAVOK. And
RVR adds per-runway values with qualifiers and tendencies.

HOW: decode_prevailing_visibility walks the visibility tokens once,
dispatching on the first one's dialect. decode_runway_visual_range
decodes each RVR token independently, keeping the good ones.

RULES:
- CAVOK excludes every other visibility value
- A second metric group must carry a compass direction (minimum visibility)
- A whole-number token is only valid directly before a fractional SM token
- RVR groups that fail to decode are reported and skipped; the field is
  None only when no group decodes
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from metar_parser.core import patterns
from metar_parser.core.context import ParseContext
from metar_parser.core.errors import ErrorSink
from metar_parser.core.report import (
    DistanceQualifier,
    PrevailingVisibility,
    RunwayVisualRange,
    RvrTendency,
    RvrUnit,
)
from metar_parser.core.tokens import RawToken


def _report_extras(tokens: Sequence[RawToken], errors: ErrorSink) -> None:
    for extra in tokens:
        errors.add("Unexpected additional visibility group {} ignored".format(extra.describe()))


def _decode_metres(tokens: Sequence[RawToken], errors: ErrorSink) -> Optional[PrevailingVisibility]:
    first = patterns.VISIBILITY_METRES_RE.fullmatch(tokens[0].text)
    if first.group("direction"):
        errors.add(
            "Prevailing visibility {} must not carry a direction".format(tokens[0].describe())
        )
        return None

    minimum_m: Optional[int] = None
    minimum_direction: Optional[str] = None
    rest = list(tokens[1:])
    if rest:
        second = patterns.VISIBILITY_METRES_RE.fullmatch(rest[0].text)
        if second is not None and second.group("direction"):
            minimum_m = int(second.group("distance"))
            minimum_direction = second.group("direction")
            rest = rest[1:]
    _report_extras(rest, errors)

    return PrevailingVisibility(
        distance_m=int(first.group("distance")),
        no_directional_variation=bool(first.group("ndv")),
        minimum_m=minimum_m,
        minimum_direction=minimum_direction,
    )


def _decode_statute_miles(tokens: Sequence[RawToken], errors: ErrorSink) -> Optional[PrevailingVisibility]:
    whole = 0
    index = 0
    if patterns.VISIBILITY_WHOLE_RE.fullmatch(tokens[0].text):
        if len(tokens) < 2:
            errors.add("Visibility {} has no unit".format(tokens[0].describe()))
            return None
        whole = int(tokens[0].text)
        index = 1

    token = tokens[index]
    match = patterns.VISIBILITY_SM_RE.fullmatch(token.text)
    if match is None:
        errors.add("Visibility group {} is malformed".format(token.describe()))
        return None

    if match.group("whole") is not None:
        if index:
            errors.add("Visibility {} cannot follow a whole number".format(token.describe()))
            return None
        distance = float(match.group("whole"))
    else:
        denominator = int(match.group("denominator"))
        if denominator == 0:
            errors.add("Visibility fraction {} has a zero denominator".format(token.describe()))
            return None
        distance = whole + int(match.group("numerator")) / denominator

    _report_extras(tokens[index + 1:], errors)
    qualifier = match.group("qualifier")
    return PrevailingVisibility(
        distance_sm=distance,
        qualifier=DistanceQualifier(qualifier) if qualifier else None,
    )


def decode_prevailing_visibility(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    context: ParseContext,
) -> Optional[PrevailingVisibility]:
    if not tokens:
        return None

    first = tokens[0].text
    if first == "CAVOK":
        _report_extras(tokens[1:], errors)
        return PrevailingVisibility(is_cavok=True)
    if patterns.VISIBILITY_METRES_RE.fullmatch(first):
        return _decode_metres(tokens, errors)
    return _decode_statute_miles(tokens, errors)


def _decode_rvr(token: RawToken, errors: ErrorSink) -> Optional[RunwayVisualRange]:
    match = patterns.RVR_RE.fullmatch(token.text)
    if match is None:
        errors.add("Runway visual range {} is malformed".format(token.describe()))
        return None

    value = int(match.group("value"))
    max_value = int(match.group("max_value")) if match.group("max_value") else None
    if max_value is not None and max_value <= value:
        errors.add(
            "Runway visual range {} has a variable maximum below its minimum".format(token.describe())
        )
        return None

    qualifier = match.group("qualifier")
    max_qualifier = match.group("max_qualifier")
    tendency = match.group("tendency")
    return RunwayVisualRange(
        runway=match.group("runway"),
        value=value,
        unit=RvrUnit.FEET if match.group("feet") else RvrUnit.METRES,
        qualifier=DistanceQualifier(qualifier) if qualifier else None,
        variable_max=max_value,
        variable_max_qualifier=DistanceQualifier(max_qualifier) if max_qualifier else None,
        tendency=RvrTendency(tendency) if tendency else None,
    )


def decode_runway_visual_range(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    context: ParseContext,
) -> Optional[Tuple[RunwayVisualRange, ...]]:
    decoded: List[RunwayVisualRange] = []
    for token in tokens:
        rvr = _decode_rvr(token, errors)
        if rvr is not None:
            decoded.append(rvr)
    return tuple(decoded) if decoded else None
