"""Present and recent weather decoders.

HOW: Each token is matched against the weather grammar
[intensity][descriptor][phenomena...] built from the WMO code tables in
config.py; the phenomena run is split into two-letter codes. Recent
weather groups are the same grammar behind an "RE" prefix, without
intensity.

RULES:
- No intensity prefix → MODERATE
- A group needs a descriptor or at least one phenomenon
- Groups that fail to decode are reported and skipped
- "//" or "///" (not observed by an automatic station) is skipped silently
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from metar_parser.core import patterns
from metar_parser.core.context import ParseContext
from metar_parser.core.errors import ErrorSink
from metar_parser.core.report import WeatherCondition, WeatherIntensity
from metar_parser.core.tokens import RawToken


def _condition_from_match(match: re.Match, intensity: WeatherIntensity) -> Optional[WeatherCondition]:
    descriptor = match.group("descriptor")
    phenomena = tuple(patterns.PHENOMENON_RE.findall(match.group("phenomena")))
    if not descriptor and not phenomena:
        return None
    return WeatherCondition(intensity=intensity, descriptor=descriptor, phenomena=phenomena)


def decode_weather_token(token: RawToken, errors: ErrorSink) -> Optional[WeatherCondition]:
    match = patterns.WEATHER_RE.fullmatch(token.text)
    condition = None
    if match is not None:
        intensity = WeatherIntensity(match.group("intensity") or "")
        condition = _condition_from_match(match, intensity)
    if condition is None:
        errors.add("Weather group {} is not a valid weather code".format(token.describe()))
    return condition


def decode_present_weather(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    context: ParseContext,
) -> Optional[Tuple[WeatherCondition, ...]]:
    decoded: List[WeatherCondition] = []
    for token in tokens:
        if patterns.WEATHER_NOT_REPORTED_RE.fullmatch(token.text):
            continue
        condition = decode_weather_token(token, errors)
        if condition is not None:
            decoded.append(condition)
    return tuple(decoded) if decoded else None


def decode_recent_weather(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    context: ParseContext,
) -> Optional[Tuple[WeatherCondition, ...]]:
    decoded: List[WeatherCondition] = []
    for token in tokens:
        match = patterns.RECENT_WEATHER_RE.fullmatch(token.text)
        condition = _condition_from_match(match, WeatherIntensity.MODERATE) if match else None
        if condition is None:
            errors.add("Recent weather group {} is not a valid weather code".format(token.describe()))
            continue
        decoded.append(condition)
    return tuple(decoded) if decoded else None
