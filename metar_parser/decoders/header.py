"""Decoders for the report header: report type, airport, time, modifiers.

WHY: The header identifies the report. The airport and the observation
time are the only mandatory groups; a report without them is still
returned, with an error explaining what is missing.

HOW: The airport decoder takes the first airport token verbatim. The
observation time decoder checks the DDHHMM[Z] shape and ranges, then
asks the context which month and year the day belongs to.

RULES:
- Airport code format is not validated here
- Missing airport → "Airport ICAO code not found"
- Observation time: day 1-31, hour 0-23, minute 0-59, and the day must
  exist in the month chosen by the context's rollover policy
- Timestamps are timezone-aware UTC datetimes
"""

from __future__ import annotations

import calendar
import datetime as dt
from typing import Optional, Sequence, Tuple

from metar_parser.config import MODIFIERS, REPORT_TYPES
from metar_parser.core import patterns
from metar_parser.core.context import ParseContext
from metar_parser.core.errors import ErrorSink
from metar_parser.core.report import MetarModifier, ObservationDayTime, ReportType
from metar_parser.core.tokens import RawToken
from metar_parser.decoders.base import first_token


def decode_report_type(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    context: ParseContext,
) -> Optional[ReportType]:
    token = first_token(tokens, errors, "report type")
    if token is None:
        return None
    if token.text not in REPORT_TYPES:
        errors.add("Unknown report type {}".format(token.describe()))
        return None
    return ReportType(token.text)


def decode_airport(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    context: ParseContext,
) -> Optional[str]:
    """Return the airport ICAO code, or record that it is missing."""
    if tokens:
        return tokens[0].text
    errors.add("Airport ICAO code not found")
    return None


def decode_observation_day_time(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    context: ParseContext,
) -> Optional[ObservationDayTime]:
    """Decode DDHHMMZ into day, hour, minute, and a UTC timestamp.

    WHY: The group has no month or year; the caller supplies them via the
    context, including the policy for days near a month boundary.

    HOW: Strict shape match, range checks, then context.resolve_month(day)
    and a calendar check that the day exists in that month.

    RULES:
    - Exactly six digits, optional trailing "Z"
    - Any failure appends one message naming the token and returns None
    """
    token = first_token(tokens, errors, "observation time")
    if token is None:
        errors.add("Observation day and time not found")
        return None

    match = patterns.DAY_TIME_RE.fullmatch(token.text)
    if match is None:
        errors.add(
            "Observation time {} is malformed, expected DDHHMMZ".format(token.describe())
        )
        return None

    day = int(match.group("day"))
    hour = int(match.group("hour"))
    minute = int(match.group("minute"))
    if not 1 <= day <= 31:
        errors.add("Observation day {} is out of range in {}".format(day, token.describe()))
        return None
    if hour > 23:
        errors.add("Observation hour {} is out of range in {}".format(hour, token.describe()))
        return None
    if minute > 59:
        errors.add("Observation minute {} is out of range in {}".format(minute, token.describe()))
        return None

    year, month = context.resolve_month(day)
    days_in_month = calendar.monthrange(year, month)[1]
    if day > days_in_month:
        errors.add(
            "Observation day {} does not exist in {} {} ({})".format(
                day, month.name.title(), year, token.describe(),
            )
        )
        return None

    return ObservationDayTime(
        day=day,
        hour=hour,
        minute=minute,
        timestamp=dt.datetime(year, month, day, hour, minute, tzinfo=dt.timezone.utc),
    )


def decode_modifiers(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    context: ParseContext,
) -> Optional[Tuple[MetarModifier, ...]]:
    if not tokens:
        return None
    modifiers = []
    for token in tokens:
        if token.text not in MODIFIERS:
            errors.add("Unknown report modifier {}".format(token.describe()))
            continue
        modifier = MetarModifier(token.text)
        if modifier in modifiers:
            errors.add("Duplicate report modifier {} ignored".format(token.describe()))
            continue
        modifiers.append(modifier)
    return tuple(modifiers) if modifiers else None
