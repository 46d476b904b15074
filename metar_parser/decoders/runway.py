"""Wind shear and runway state decoders.

WHY: Both supplementary groups are runway-specific and both use compact
codes that mean nothing without a lookup table: "R24/290050" is deposit
2 (wet), extent 9 (51-100%), depth 00 mm, friction coefficient 0.50.

HOW: Wind shear tokens are read as a small sentence ("WS R24", "WS ALL
RWY"). Runway state groups are matched against the ICAO format
(Rdd/DECCFF) or the legacy eight-digit format (ddDECCFF), then each code
character is looked up in the tables in config.py.

RULES:
- Legacy designator 88 → all runways, 99 → repeated previous report,
  51-86 → right-hand runway (designator - 50, suffix "R")
- Depth 00-90 mm as coded, 92-98 special values, 99 → runway not operational
- Friction 01-90 → coefficient 0.01-0.90, 91-95/99 → braking action text
- CLRDff → contamination cleared; SNOCLO → aerodrome closed by snow
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from metar_parser.config import (
    ALL_RUNWAYS_DESIGNATOR,
    REPEATED_RUNWAY_DESIGNATOR,
    RIGHT_RUNWAY_OFFSET,
    RUNWAY_BRAKING_ACTION,
    RUNWAY_CONTAMINATION,
    RUNWAY_DEPOSITS,
    RUNWAY_DEPTH_SPECIAL_MM,
)
from metar_parser.core import patterns
from metar_parser.core.context import ParseContext
from metar_parser.core.errors import ErrorSink
from metar_parser.core.report import RunwayCondition, WindShear
from metar_parser.core.tokens import RawToken


# ---------------------------------------------------------------------------
# Wind shear
# ---------------------------------------------------------------------------

def decode_wind_shear(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    context: ParseContext,
) -> Optional[WindShear]:
    if not tokens:
        return None

    all_runways = False
    runways: List[str] = []
    for token in tokens:
        if token.text in (patterns.WIND_SHEAR_MARKER, "RWY"):
            continue
        if token.text == "ALL":
            all_runways = True
            continue
        match = patterns.WIND_SHEAR_RUNWAY_RE.fullmatch(token.text)
        if match is None:
            errors.add("Wind shear group {} is malformed".format(token.describe()))
            continue
        runways.append(match.group("runway"))

    if not all_runways and not runways:
        errors.add("Wind shear group at position {} names no runway".format(tokens[0].offset))
        return None
    return WindShear(all_runways=all_runways, runways=tuple(runways))


# ---------------------------------------------------------------------------
# Runway state
# ---------------------------------------------------------------------------

def _legacy_runway(designator: int) -> str:
    if designator == ALL_RUNWAYS_DESIGNATOR:
        return "ALL"
    if designator == REPEATED_RUNWAY_DESIGNATOR:
        return "REPEATED"
    if designator > RIGHT_RUNWAY_OFFSET:
        return "{:02d}R".format(designator - RIGHT_RUNWAY_OFFSET)
    return "{:02d}".format(designator)


def _friction(code: Optional[str]) -> Tuple[Optional[float], Optional[str]]:
    if code is None or code == "//":
        return None, None
    value = int(code)
    if value in RUNWAY_BRAKING_ACTION:
        return None, RUNWAY_BRAKING_ACTION[value]
    if 1 <= value <= 90:
        return value / 100, None
    return None, None


def _depth(code: str) -> Tuple[Optional[int], bool]:
    if code == "//":
        return None, False
    value = int(code)
    if value == 99:
        return None, True
    if value in RUNWAY_DEPTH_SPECIAL_MM:
        return RUNWAY_DEPTH_SPECIAL_MM[value], False
    return value, False


def _decode_runway_condition(token: RawToken, errors: ErrorSink) -> Optional[RunwayCondition]:
    if patterns.AERODROME_CLOSED_RE.fullmatch(token.text):
        return RunwayCondition(runway="ALL", is_closed=True)

    match = patterns.RUNWAY_CONDITION_RE.fullmatch(token.text)
    if match is not None:
        runway = match.group("runway")
        if match.group("closed"):
            return RunwayCondition(runway=runway, is_closed=True)
    else:
        match = patterns.RUNWAY_CONDITION_LEGACY_RE.fullmatch(token.text)
        if match is None:
            errors.add("Runway condition {} is malformed".format(token.describe()))
            return None
        runway = _legacy_runway(int(match.group("designator")))

    if match.group("cleared_friction") is not None:
        coefficient, braking = _friction(match.group("cleared_friction"))
        return RunwayCondition(
            runway=runway,
            is_cleared=True,
            friction_coefficient=coefficient,
            braking_action=braking,
        )

    contamination_code = match.group("contamination")
    if contamination_code not in RUNWAY_CONTAMINATION:
        errors.add(
            "Runway contamination code '{}' is not valid in {}".format(
                contamination_code, token.describe(),
            )
        )
        return None

    depth_mm, not_operational = _depth(match.group("depth"))
    coefficient, braking = _friction(match.group("friction"))
    deposit_code = match.group("deposit")
    return RunwayCondition(
        runway=runway,
        deposit=None if deposit_code == "/" else RUNWAY_DEPOSITS[deposit_code],
        contamination=None if contamination_code == "/" else RUNWAY_CONTAMINATION[contamination_code],
        depth_mm=depth_mm,
        runway_not_operational=not_operational,
        friction_coefficient=coefficient,
        braking_action=braking,
    )


def decode_runway_conditions(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    context: ParseContext,
) -> Optional[Tuple[RunwayCondition, ...]]:
    decoded: List[RunwayCondition] = []
    for token in tokens:
        condition = _decode_runway_condition(token, errors)
        if condition is not None:
            decoded.append(condition)
    return tuple(decoded) if decoded else None
