"""Configuration defaults, METAR code tables, and .env loading.

WHY: Centralizes every configurable value and every lookup table the
decoders rely on, so they are easy to find, update, and override. The
METAR code tables (weather descriptors, cloud cover, runway deposits...)
are plain data structures, not buried in decoder logic.

HOW: python-dotenv loads the .env file on import. Code tables are
module-level dicts and frozensets. load_rollover_policy() reads the
month-rollover policy from the environment and fails loudly on a typo.

RULES:
- Code tables are read-only after import; nothing mutates them
- METAR_ROLLOVER_POLICY selects how a report day is placed in a month
  ("none" or "previous_month"), default "none"
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Month rollover policy
# ---------------------------------------------------------------------------

ROLLOVER_POLICIES: frozenset[str] = frozenset({"none", "previous_month"})
"""Accepted values for METAR_ROLLOVER_POLICY."""

DEFAULT_ROLLOVER_POLICY = "none"


def load_rollover_policy() -> str:
    """Load the month-rollover policy name from the environment.

    WHY: A METAR only carries the day of month. Whether a day later than
    "today" belongs to the previous month is a deployment decision, not
    something the parser should guess.

    HOW: Reads METAR_ROLLOVER_POLICY from os.environ (populated by
    python-dotenv), lowercased and stripped.

    RULES:
    - Missing or empty variable → DEFAULT_ROLLOVER_POLICY
    - Raises ValueError for any value outside ROLLOVER_POLICIES
    """
    value = os.getenv("METAR_ROLLOVER_POLICY", "").strip().lower()
    if not value:
        return DEFAULT_ROLLOVER_POLICY
    if value not in ROLLOVER_POLICIES:
        raise ValueError(
            "Unknown METAR_ROLLOVER_POLICY '{}'. "
            "Expected one of: {}.".format(value, ", ".join(sorted(ROLLOVER_POLICIES)))
        )
    return value


# ---------------------------------------------------------------------------
# Header groups
# ---------------------------------------------------------------------------

REPORT_TYPES: dict[str, str] = {
    "METAR": "Routine report",
    "SPECI": "Special report",
}

MODIFIERS: dict[str, str] = {
    "AUTO": "Fully automated report",
    "COR": "Correction of a previous report",
    "NIL": "Missing report",
}

TREND_MARKERS: dict[str, str] = {
    "NOSIG": "No significant change",
    "BECMG": "Becoming",
    "TEMPO": "Temporarily",
}

REMARKS_MARKER = "RMK"

# ---------------------------------------------------------------------------
# Wind and visibility
# ---------------------------------------------------------------------------

WIND_UNITS: dict[str, str] = {
    "KT": "knots",
    "MPS": "metres per second",
    "KMH": "kilometres per hour",
}

COMPASS_DIRECTIONS: frozenset[str] = frozenset({
    "N", "NE", "E", "SE", "S", "SW", "W", "NW",
})

# 9999 in a METAR means "10 km or more".
MAX_VISIBILITY_M = 9999

# ---------------------------------------------------------------------------
# Weather phenomena (WMO code table 4678)
# ---------------------------------------------------------------------------

WEATHER_INTENSITIES: dict[str, str] = {
    "-": "light",
    "+": "heavy",
    "VC": "in the vicinity",
}

WEATHER_DESCRIPTORS: dict[str, str] = {
    "MI": "shallow",
    "BC": "patches",
    "PR": "partial",
    "DR": "low drifting",
    "BL": "blowing",
    "SH": "showers",
    "TS": "thunderstorm",
    "FZ": "freezing",
}

WEATHER_PHENOMENA: dict[str, str] = {
    # Precipitation
    "DZ": "drizzle",
    "RA": "rain",
    "SN": "snow",
    "SG": "snow grains",
    "IC": "ice crystals",
    "PL": "ice pellets",
    "GR": "hail",
    "GS": "small hail",
    "UP": "unknown precipitation",
    # Obscuration
    "BR": "mist",
    "FG": "fog",
    "FU": "smoke",
    "VA": "volcanic ash",
    "DU": "widespread dust",
    "SA": "sand",
    "HZ": "haze",
    "PY": "spray",
    # Other
    "PO": "dust whirls",
    "SQ": "squalls",
    "FC": "funnel cloud",
    "SS": "sandstorm",
    "DS": "duststorm",
}

NO_SIGNIFICANT_WEATHER = "NSW"

# ---------------------------------------------------------------------------
# Clouds
# ---------------------------------------------------------------------------

CLOUD_COVERS: dict[str, str] = {
    "FEW": "few",
    "SCT": "scattered",
    "BKN": "broken",
    "OVC": "overcast",
    "VV": "vertical visibility",
    "SKC": "sky clear",
    "CLR": "clear below 12,000 ft",
    "NSC": "no significant cloud",
    "NCD": "no cloud detected",
}

CONVECTIVE_CLOUDS: dict[str, str] = {
    "CB": "cumulonimbus",
    "TCU": "towering cumulus",
}

# Cloud heights are coded in hundreds of feet.
CLOUD_HEIGHT_UNIT_FT = 100

# ---------------------------------------------------------------------------
# Pressure
# ---------------------------------------------------------------------------

QNH_RANGE_HPA = (850, 1100)
ALTIMETER_RANGE_INHG = (25.0, 33.0)

# ---------------------------------------------------------------------------
# Runway state (EUR Doc / MOTNE code tables)
# ---------------------------------------------------------------------------

RUNWAY_DEPOSITS: dict[str, str] = {
    "0": "clear and dry",
    "1": "damp",
    "2": "wet or water patches",
    "3": "rime or frost covered",
    "4": "dry snow",
    "5": "wet snow",
    "6": "slush",
    "7": "ice",
    "8": "compacted or rolled snow",
    "9": "frozen ruts or ridges",
    "/": "not reported",
}

RUNWAY_CONTAMINATION: dict[str, str] = {
    "1": "10% or less",
    "2": "11% to 25%",
    "5": "26% to 50%",
    "9": "51% to 100%",
    "/": "not reported",
}

# Depth codes 92-98 are not millimetres; they map to these values.
RUNWAY_DEPTH_SPECIAL_MM: dict[int, int] = {
    92: 100,
    93: 150,
    94: 200,
    95: 250,
    96: 300,
    97: 350,
    98: 400,
}

RUNWAY_BRAKING_ACTION: dict[int, str] = {
    91: "poor",
    92: "medium/poor",
    93: "medium",
    94: "medium/good",
    95: "good",
    99: "unreliable",
}

# Legacy eight-digit runway designators.
ALL_RUNWAYS_DESIGNATOR = 88
REPEATED_RUNWAY_DESIGNATOR = 99
RIGHT_RUNWAY_OFFSET = 50
