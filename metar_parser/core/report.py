"""Decoded report dataclasses.

WHY: Callers need a single, well-typed result per METAR. Any group may
be missing or malformed in real-world reports, so every field is
optional and the reasons for absences travel alongside in parse_errors.

HOW: One frozen dataclass per decoded group, plus the Report container
that holds them. Enumerations cover the closed code sets (report type,
modifier, units, intensities...). Repeated groups are tuples in source
order.

RULES:
- Every Report field except parse_errors may be None (absent)
- parse_errors is always a tuple, possibly empty
- All dataclasses are frozen; a Report is never mutated after construction
- Heights are feet, visibility distances metres or statute miles as coded,
  temperatures degrees Celsius
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from metar_parser.core.context import Month


# ---------------------------------------------------------------------------
# Header groups
# ---------------------------------------------------------------------------

class ReportType(Enum):
    METAR = "METAR"
    SPECI = "SPECI"


class MetarModifier(Enum):
    AUTO = "AUTO"
    COR = "COR"
    NIL = "NIL"


@dataclass(frozen=True)
class ObservationDayTime:
    """Observation day and time (UTC) with the timestamp resolved from context."""

    day: int
    hour: int
    minute: int
    timestamp: dt.datetime


# ---------------------------------------------------------------------------
# Wind and visibility
# ---------------------------------------------------------------------------

class WindUnit(Enum):
    KNOTS = "KT"
    METRES_PER_SECOND = "MPS"
    KILOMETRES_PER_HOUR = "KMH"


@dataclass(frozen=True)
class SurfaceWind:
    """Surface wind group plus the optional variable-direction sector.

    RULES:
    - direction is None when variable (VRB) or not reported (///)
    - speed is None when not reported (//)
    - variable_from / variable_to come from a following dddVddd group
    """

    direction: Optional[int]
    speed: Optional[int]
    unit: WindUnit
    gust: Optional[int] = None
    is_variable: bool = False
    variable_from: Optional[int] = None
    variable_to: Optional[int] = None

    @property
    def is_calm(self) -> bool:
        return self.direction == 0 and self.speed == 0


class DistanceQualifier(Enum):
    """P / M prefixes: the true value is above / below the coded one."""

    ABOVE = "P"
    BELOW = "M"


@dataclass(frozen=True)
class PrevailingVisibility:
    """Prevailing visibility.

    RULES:
    - is_cavok: ceiling and visibility OK, no other value is set
    - distance_m: metric groups; 9999 means 10 km or more
    - distance_sm: statute-mile groups, mixed fractions summed ("1 1/2SM" → 1.5)
    - minimum_m / minimum_direction: second metric group "1500SW"
    """

    is_cavok: bool = False
    distance_m: Optional[int] = None
    distance_sm: Optional[float] = None
    qualifier: Optional[DistanceQualifier] = None
    no_directional_variation: bool = False
    minimum_m: Optional[int] = None
    minimum_direction: Optional[str] = None


class RvrTendency(Enum):
    UPWARD = "U"
    DOWNWARD = "D"
    NO_CHANGE = "N"


class RvrUnit(Enum):
    METRES = "M"
    FEET = "FT"


@dataclass(frozen=True)
class RunwayVisualRange:
    """One RVR group, e.g. R24/P1500N or R09L/0600V1000FT/U."""

    runway: str
    value: int
    unit: RvrUnit
    qualifier: Optional[DistanceQualifier] = None
    variable_max: Optional[int] = None
    variable_max_qualifier: Optional[DistanceQualifier] = None
    tendency: Optional[RvrTendency] = None


# ---------------------------------------------------------------------------
# Weather and clouds
# ---------------------------------------------------------------------------

class WeatherIntensity(Enum):
    LIGHT = "-"
    MODERATE = ""
    HEAVY = "+"
    IN_VICINITY = "VC"


@dataclass(frozen=True)
class WeatherCondition:
    """One present- or recent-weather group, e.g. +TSRA → heavy, TS, (RA,)."""

    intensity: WeatherIntensity
    descriptor: Optional[str] = None
    phenomena: Tuple[str, ...] = ()


class CloudCover(Enum):
    FEW = "FEW"
    SCATTERED = "SCT"
    BROKEN = "BKN"
    OVERCAST = "OVC"
    VERTICAL_VISIBILITY = "VV"
    SKY_CLEAR = "SKC"
    CLEAR = "CLR"
    NO_SIGNIFICANT_CLOUD = "NSC"
    NO_CLOUD_DETECTED = "NCD"
    NOT_REPORTED = "///"


class ConvectiveCloud(Enum):
    CUMULONIMBUS = "CB"
    TOWERING_CUMULUS = "TCU"


@dataclass(frozen=True)
class CloudLayer:
    """One cloud group. height_ft is None for clear-sky codes and /// heights."""

    cover: CloudCover
    height_ft: Optional[int] = None
    convective: Optional[ConvectiveCloud] = None


# ---------------------------------------------------------------------------
# Temperature and pressure
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TemperatureInfo:
    temperature_c: Optional[int]
    dew_point_c: Optional[int]


class PressureUnit(Enum):
    HECTOPASCALS = "Q"
    INCHES_OF_MERCURY = "A"


@dataclass(frozen=True)
class AltimeterSetting:
    value: float
    unit: PressureUnit


# ---------------------------------------------------------------------------
# Supplementary groups
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class WindShear:
    """Wind shear on all runways or on the listed runway designators."""

    all_runways: bool = False
    runways: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RunwayCondition:
    """State of one runway (deposit, extent, depth, braking action).

    RULES:
    - Code characters "/" (not reported) decode to None
    - depth_mm is None when not reported; runway_not_operational for depth 99
    - friction_coefficient is set for codes 01-90, braking_action for 91-99
    - is_cleared (CLRD) and is_closed (SNOCLO) carry no other values
    """

    runway: str
    deposit: Optional[str] = None
    contamination: Optional[str] = None
    depth_mm: Optional[int] = None
    runway_not_operational: bool = False
    friction_coefficient: Optional[float] = None
    braking_action: Optional[str] = None
    is_cleared: bool = False
    is_closed: bool = False


class TrendType(Enum):
    NOSIG = "NOSIG"
    BECOMING = "BECMG"
    TEMPORARY = "TEMPO"


@dataclass(frozen=True)
class TrendChange:
    """One NOSIG / BECMG / TEMPO block and the groups that follow it."""

    trend_type: TrendType
    from_time: Optional[dt.time] = None
    until_time: Optional[dt.time] = None
    at_time: Optional[dt.time] = None
    surface_wind: Optional[SurfaceWind] = None
    prevailing_visibility: Optional[PrevailingVisibility] = None
    weather: Optional[Tuple[WeatherCondition, ...]] = None
    no_significant_weather: bool = False
    cloud_layers: Optional[Tuple[CloudLayer, ...]] = None


@dataclass(frozen=True)
class Trend:
    changes: Tuple[TrendChange, ...]


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Report:
    """The complete decoded METAR.

    WHY: This is the only object callers receive. It holds every decoded
    group and the list of problems met while decoding them.

    HOW: Built once by the assembler from decoder outputs; never mutated.

    RULES:
    - raw: echo of the input text, set on every report including the
      no-groups fast fail; it is not a decoded field
    - month: the context month the report was parsed against
    - unrecognized: texts of groups no rule matched, in source order
    - parse_errors: always present; order follows decoder order
    """

    raw: str = ""
    report_type: Optional[ReportType] = None
    airport: Optional[str] = None
    observation_day_time: Optional[ObservationDayTime] = None
    month: Optional[Month] = None
    modifiers: Optional[Tuple[MetarModifier, ...]] = None
    surface_wind: Optional[SurfaceWind] = None
    prevailing_visibility: Optional[PrevailingVisibility] = None
    runway_visual_range: Optional[Tuple[RunwayVisualRange, ...]] = None
    present_weather: Optional[Tuple[WeatherCondition, ...]] = None
    cloud_layers: Optional[Tuple[CloudLayer, ...]] = None
    temperature: Optional[TemperatureInfo] = None
    altimeter_setting: Optional[AltimeterSetting] = None
    recent_weather: Optional[Tuple[WeatherCondition, ...]] = None
    wind_shear: Optional[WindShear] = None
    runway_conditions: Optional[Tuple[RunwayCondition, ...]] = None
    trend: Optional[Trend] = None
    remarks: Optional[str] = None
    unrecognized: Optional[Tuple[str, ...]] = None
    parse_errors: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_nil(self) -> bool:
        return bool(self.modifiers) and MetarModifier.NIL in self.modifiers
