"""Trend (landing forecast) decoder.

WHY: A trend appends forecast changes to the observation: "NOSIG",
"BECMG FM1200 25020KT", "TEMPO 3000 SHRA BKN015CB". The groups inside a
change use the same grammar as the observation, so they are decoded by
the same decoders.

HOW: Split the trend tokens at each NOSIG / BECMG / TEMPO marker. Within
a change, FM/TL/AT time groups and NSW are read here; everything else
goes through classify_change_groups() and the wind, visibility, weather,
and cloud decoders, sharing the report's error sink.

RULES:
- One TrendChange per marker, in source order
- Time groups: hour 00-24, minute 00-59; "2400" means midnight
- Tokens that are neither time, NSW, nor a change group are reported
"""

from __future__ import annotations

import datetime as dt
from typing import Dict, List, Optional, Sequence

from metar_parser.config import NO_SIGNIFICANT_WEATHER, TREND_MARKERS
from metar_parser.core import patterns
from metar_parser.core.classifier import classify_change_groups
from metar_parser.core.context import ParseContext
from metar_parser.core.errors import ErrorSink
from metar_parser.core.report import Trend, TrendChange, TrendType
from metar_parser.core.tokens import RawToken, TokenType
from metar_parser.decoders.clouds import decode_cloud_layers
from metar_parser.decoders.visibility import decode_prevailing_visibility
from metar_parser.decoders.weather import decode_present_weather
from metar_parser.decoders.wind import decode_surface_wind

_TIME_FIELDS = {"FM": "from_time", "TL": "until_time", "AT": "at_time"}


def _split_changes(tokens: Sequence[RawToken], errors: ErrorSink) -> List[List[RawToken]]:
    changes: List[List[RawToken]] = []
    for token in tokens:
        if token.text in TREND_MARKERS:
            changes.append([token])
        elif changes:
            changes[-1].append(token)
        else:
            errors.add("Trend group {} precedes any trend marker".format(token.describe()))
    return changes


def _decode_time(token: RawToken, errors: ErrorSink) -> Optional[dt.time]:
    match = patterns.TREND_TIME_RE.fullmatch(token.text)
    hour, minute = int(match.group("hour")), int(match.group("minute"))
    if hour > 24 or minute > 59 or (hour == 24 and minute != 0):
        errors.add("Trend time {} is out of range".format(token.describe()))
        return None
    return dt.time(hour % 24, minute)


def _decode_change(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    context: ParseContext,
) -> TrendChange:
    marker, body = tokens[0], tokens[1:]
    times: Dict[str, Optional[dt.time]] = {}
    no_significant_weather = False
    groups: List[RawToken] = []

    for token in body:
        time_match = patterns.TREND_TIME_RE.fullmatch(token.text)
        if time_match is not None:
            field_name = _TIME_FIELDS[time_match.group("prefix")]
            if field_name in times:
                errors.add("Duplicate trend time {} ignored".format(token.describe()))
                continue
            times[field_name] = _decode_time(token, errors)
        elif token.text == NO_SIGNIFICANT_WEATHER:
            no_significant_weather = True
        else:
            groups.append(token)

    grouped = classify_change_groups(groups)
    for unknown in grouped.group(TokenType.UNKNOWN):
        errors.add("Unrecognized trend group {}".format(unknown.describe()))

    return TrendChange(
        trend_type=TrendType(marker.text),
        from_time=times.get("from_time"),
        until_time=times.get("until_time"),
        at_time=times.get("at_time"),
        surface_wind=decode_surface_wind(grouped.group(TokenType.SURFACE_WIND), errors, context),
        prevailing_visibility=decode_prevailing_visibility(
            grouped.group(TokenType.PREVAILING_VISIBILITY), errors, context,
        ),
        weather=decode_present_weather(grouped.group(TokenType.PRESENT_WEATHER), errors, context),
        no_significant_weather=no_significant_weather,
        cloud_layers=decode_cloud_layers(grouped.group(TokenType.CLOUD_LAYER), errors, context),
    )


def decode_trend(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    context: ParseContext,
) -> Optional[Trend]:
    if not tokens:
        return None
    changes = _split_changes(tokens, errors)
    if not changes:
        return None
    return Trend(changes=tuple(_decode_change(change, errors, context) for change in changes))
