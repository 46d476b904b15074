"""Surface wind decoder.

WHY: Wind is the group most often malformed by hand-typed reports
(three-digit speeds, missing units, impossible directions). The
classifier routes anything ending in KT / MPS / KMH here so those
problems are explained instead of silently dropped.

HOW: The first wind token is matched against the strict grammar
dddff[Gfff]KT; a following dddVddd token supplies the variable sector.

RULES:
- Direction 000-360, "VRB" → variable (direction None), "///" → not reported
- Speed "//" → not reported (None)
- A gust must be higher than the mean speed
- A variable sector without a wind group is an error
- Sector bounds must both be 000-360
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from metar_parser.core import patterns
from metar_parser.core.context import ParseContext
from metar_parser.core.errors import ErrorSink
from metar_parser.core.report import SurfaceWind, WindUnit
from metar_parser.core.tokens import RawToken


def _split_wind_tokens(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
) -> Tuple[Optional[RawToken], Optional[RawToken]]:
    wind_token: Optional[RawToken] = None
    sector_token: Optional[RawToken] = None
    for token in tokens:
        if patterns.WIND_SECTOR_RE.fullmatch(token.text):
            if sector_token is None:
                sector_token = token
            else:
                errors.add("Unexpected additional wind sector {} ignored".format(token.describe()))
        elif wind_token is None:
            wind_token = token
        else:
            errors.add("Unexpected additional wind group {} ignored".format(token.describe()))
    return wind_token, sector_token


def decode_surface_wind(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    context: ParseContext,
) -> Optional[SurfaceWind]:
    if not tokens:
        return None

    wind_token, sector_token = _split_wind_tokens(tokens, errors)
    if wind_token is None:
        errors.add("Wind variability {} found without a wind group".format(sector_token.describe()))
        return None

    match = patterns.WIND_RE.fullmatch(wind_token.text)
    if match is None:
        errors.add("Wind group {} is malformed, expected dddff[Gff]KT".format(wind_token.describe()))
        return None

    raw_direction = match.group("direction")
    direction: Optional[int] = None
    if raw_direction.isdigit():
        direction = int(raw_direction)
        if direction > 360:
            errors.add("Wind direction {} is out of range in {}".format(direction, wind_token.describe()))
            return None

    speed = int(match.group("speed")) if match.group("speed").isdigit() else None
    gust = int(match.group("gust")) if match.group("gust") else None
    if gust is not None and speed is not None and gust <= speed:
        errors.add(
            "Wind gust {} is not above mean speed {} in {}".format(gust, speed, wind_token.describe())
        )
        return None

    variable_from: Optional[int] = None
    variable_to: Optional[int] = None
    if sector_token is not None:
        sector = patterns.WIND_SECTOR_RE.fullmatch(sector_token.text)
        low, high = int(sector.group("from")), int(sector.group("to"))
        if low > 360 or high > 360:
            errors.add("Wind variability {} is out of range".format(sector_token.describe()))
        else:
            variable_from, variable_to = low, high

    return SurfaceWind(
        direction=direction,
        speed=speed,
        unit=WindUnit(match.group("unit")),
        gust=gust,
        is_variable=raw_direction == "VRB",
        variable_from=variable_from,
        variable_to=variable_to,
    )
