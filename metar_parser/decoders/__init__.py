"""Field decoder registry, in decode order.

WHY: The assembler drives every decoder the same way. A single ordered
table makes the decode order explicit and deterministic, and adding a
field means one new decoder function plus one line here.

HOW: DECODERS is a tuple of DecoderEntry (Report field name, TokenType
read, decoder function). The assembler iterates it front to back with
one shared ErrorSink, so parse_errors follow this order.

RULES:
- Header fields first, then the groups in the order they appear in a METAR
- Every field_name must be a Report attribute
- Every TokenType is read by exactly one entry
"""

from __future__ import annotations

from metar_parser.core.tokens import TokenType
from metar_parser.decoders.base import DecoderEntry
from metar_parser.decoders.clouds import decode_cloud_layers
from metar_parser.decoders.header import (
    decode_airport,
    decode_modifiers,
    decode_observation_day_time,
    decode_report_type,
)
from metar_parser.decoders.remarks import decode_remarks, decode_unrecognized
from metar_parser.decoders.runway import decode_runway_conditions, decode_wind_shear
from metar_parser.decoders.temperature import decode_altimeter_setting, decode_temperature
from metar_parser.decoders.trend import decode_trend
from metar_parser.decoders.visibility import (
    decode_prevailing_visibility,
    decode_runway_visual_range,
)
from metar_parser.decoders.weather import decode_present_weather, decode_recent_weather
from metar_parser.decoders.wind import decode_surface_wind

DECODERS: tuple[DecoderEntry, ...] = (
    DecoderEntry("report_type", TokenType.REPORT_TYPE, decode_report_type),
    DecoderEntry("airport", TokenType.AIRPORT, decode_airport),
    DecoderEntry("observation_day_time", TokenType.OBSERVATION_DAY_TIME, decode_observation_day_time),
    DecoderEntry("modifiers", TokenType.MODIFIER, decode_modifiers),
    DecoderEntry("surface_wind", TokenType.SURFACE_WIND, decode_surface_wind),
    DecoderEntry("prevailing_visibility", TokenType.PREVAILING_VISIBILITY, decode_prevailing_visibility),
    DecoderEntry("runway_visual_range", TokenType.RUNWAY_VISUAL_RANGE, decode_runway_visual_range),
    DecoderEntry("present_weather", TokenType.PRESENT_WEATHER, decode_present_weather),
    DecoderEntry("cloud_layers", TokenType.CLOUD_LAYER, decode_cloud_layers),
    DecoderEntry("temperature", TokenType.TEMPERATURE, decode_temperature),
    DecoderEntry("altimeter_setting", TokenType.ALTIMETER_SETTING, decode_altimeter_setting),
    DecoderEntry("recent_weather", TokenType.RECENT_WEATHER, decode_recent_weather),
    DecoderEntry("wind_shear", TokenType.WIND_SHEAR, decode_wind_shear),
    DecoderEntry("runway_conditions", TokenType.RUNWAY_CONDITION, decode_runway_conditions),
    DecoderEntry("trend", TokenType.TREND, decode_trend),
    DecoderEntry("remarks", TokenType.REMARKS, decode_remarks),
    DecoderEntry("unrecognized", TokenType.UNKNOWN, decode_unrecognized),
)
