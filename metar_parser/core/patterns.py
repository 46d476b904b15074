"""Compiled regular expressions for METAR group shapes.

WHY: The classifier and the decoders both need to recognise group
shapes. Keeping every pattern in one module means the two stages can
never disagree about what, say, a weather group looks like.

HOW: Two families of patterns:
  *_SHAPE_RE: loose shapes used by the classifier to route a token to a
               decoder, so a malformed-but-recognisable group still
               reaches the decoder that can explain what is wrong with it
  *_RE      : strict grammars with named groups used by the decoders

RULES:
- Every pattern is used with fullmatch(), never search()
- Weather patterns are built from the code tables in config.py
"""

from __future__ import annotations

import re

from metar_parser.config import (
    CLOUD_COVERS,
    COMPASS_DIRECTIONS,
    CONVECTIVE_CLOUDS,
    WEATHER_DESCRIPTORS,
    WEATHER_PHENOMENA,
)


def _alternation(codes) -> str:
    # Longest first so "TCU" is tried before any shorter prefix.
    return "|".join(sorted((re.escape(code) for code in codes), key=len, reverse=True))


_DESCRIPTORS = _alternation(WEATHER_DESCRIPTORS)
_PHENOMENA = _alternation(WEATHER_PHENOMENA)
_COMPASS = _alternation(COMPASS_DIRECTIONS)
_LAYER_COVERS = _alternation(code for code in CLOUD_COVERS if code in ("FEW", "SCT", "BKN", "OVC", "VV"))
_CLEAR_COVERS = _alternation(code for code in CLOUD_COVERS if code in ("SKC", "CLR", "NSC", "NCD"))
_CONVECTIVE = _alternation(CONVECTIVE_CLOUDS)

# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------

AIRPORT_SHAPE_RE = re.compile(r"[A-Z][A-Z0-9]{1,3}")
DAY_TIME_SHAPE_RE = re.compile(r"\d{4}(?:\d{2})?Z")
DAY_TIME_RE = re.compile(r"(?P<day>\d{2})(?P<hour>\d{2})(?P<minute>\d{2})Z?")

# ---------------------------------------------------------------------------
# Wind
# ---------------------------------------------------------------------------

WIND_SHAPE_RE = re.compile(r"[0-9A-Z/]+(?:KT|MPS|KMH)")
WIND_RE = re.compile(
    r"(?P<direction>\d{3}|VRB|///)"
    r"(?P<speed>\d{2,3}|//)"
    r"(?:G(?P<gust>\d{2,3}))?"
    r"(?P<unit>KT|MPS|KMH)"
)
WIND_SECTOR_RE = re.compile(r"(?P<from>\d{3})V(?P<to>\d{3})")

# ---------------------------------------------------------------------------
# Visibility and RVR
# ---------------------------------------------------------------------------

VISIBILITY_METRES_RE = re.compile(
    r"(?P<distance>\d{4})(?:(?P<ndv>NDV)|(?P<direction>" + _COMPASS + r"))?"
)
VISIBILITY_SM_SHAPE_RE = re.compile(r"[PM]?[0-9/]+SM")
VISIBILITY_SM_RE = re.compile(
    r"(?P<qualifier>[PM])?(?:(?P<numerator>\d+)/(?P<denominator>\d+)|(?P<whole>\d+))SM"
)
VISIBILITY_FRACTION_SM_RE = re.compile(r"[PM]?\d/\d{1,2}SM")
VISIBILITY_WHOLE_RE = re.compile(r"\d{1,2}")

RVR_RE = re.compile(
    r"R(?P<runway>\d{2}[LCR]?)/"
    r"(?P<qualifier>[PM])?(?P<value>\d{4})"
    r"(?:V(?P<max_qualifier>[PM])?(?P<max_value>\d{4}))?"
    r"(?P<feet>FT)?"
    r"/?(?P<tendency>[UDN])?"
)

# ---------------------------------------------------------------------------
# Runway condition and wind shear
# ---------------------------------------------------------------------------

RUNWAY_CONDITION_RE = re.compile(
    r"R(?P<runway>\d{2}[LCR]?)/"
    r"(?:(?P<deposit>[\d/])(?P<contamination>[\d/])(?P<depth>\d{2}|//)(?P<friction>\d{2}|//)"
    r"|CLRD(?P<cleared_friction>\d{2}|//)"
    r"|(?P<closed>SNOCLO))"
)
RUNWAY_CONDITION_LEGACY_RE = re.compile(
    r"(?P<designator>\d{2})"
    r"(?:(?P<deposit>[\d/])(?P<contamination>[\d/])(?P<depth>\d{2}|//)(?P<friction>\d{2}|//)"
    r"|CLRD(?P<cleared_friction>\d{2}|//))"
)
AERODROME_CLOSED_RE = re.compile(r"(?:R/)?SNOCLO")

WIND_SHEAR_MARKER = "WS"
WIND_SHEAR_RUNWAY_RE = re.compile(r"R(?:WY)?(?P<runway>\d{2}[LCR]?)")

# ---------------------------------------------------------------------------
# Weather
# ---------------------------------------------------------------------------

WEATHER_RE = re.compile(
    r"(?P<intensity>[+-]|VC)?"
    r"(?P<descriptor>" + _DESCRIPTORS + r")?"
    r"(?P<phenomena>(?:" + _PHENOMENA + r")*)"
)
RECENT_WEATHER_RE = re.compile(
    r"RE"
    r"(?P<descriptor>" + _DESCRIPTORS + r")?"
    r"(?P<phenomena>(?:" + _PHENOMENA + r")*)"
)
PHENOMENON_RE = re.compile(_PHENOMENA)
# Automatic stations send slashes when present weather cannot be observed.
WEATHER_NOT_REPORTED_RE = re.compile(r"///?")

# ---------------------------------------------------------------------------
# Clouds
# ---------------------------------------------------------------------------

CLOUD_SHAPE_RE = re.compile(
    r"(?:(?:" + _LAYER_COVERS + r")[0-9/]{3}|/{6})[A-Z/]*"
    r"|" + _CLEAR_COVERS
)
CLOUD_RE = re.compile(
    r"(?:(?P<cover>" + _LAYER_COVERS + r")|(?P<missing_cover>///))"
    r"(?P<height>\d{3}|///)"
    r"(?:(?P<convective>" + _CONVECTIVE + r")|///)?"
)
CLEAR_SKY_RE = re.compile(_CLEAR_COVERS)

# ---------------------------------------------------------------------------
# Temperature and pressure
# ---------------------------------------------------------------------------

# A numeric side is required, except for the fully missing "/////".
TEMPERATURE_SHAPE_RE = re.compile(r"M?\d{1,2}/(?:M?\d{1,2}|//)?|///M?\d{1,2}|/////")
TEMPERATURE_RE = re.compile(r"(?P<temperature>M?\d{2}|//)/(?P<dew_point>M?\d{2}|//)?")

ALTIMETER_SHAPE_RE = re.compile(r"[QA][0-9/]{4}")
ALTIMETER_RE = re.compile(r"(?P<unit>[QA])(?P<value>\d{4})")

# ---------------------------------------------------------------------------
# Trend
# ---------------------------------------------------------------------------

TREND_TIME_RE = re.compile(r"(?P<prefix>FM|TL|AT)(?P<hour>\d{2})(?P<minute>\d{2})")
