"""Temperature / dew point and altimeter setting decoders."""

from __future__ import annotations

from typing import Optional, Sequence

from metar_parser.config import ALTIMETER_RANGE_INHG, QNH_RANGE_HPA
from metar_parser.core import patterns
from metar_parser.core.context import ParseContext
from metar_parser.core.errors import ErrorSink
from metar_parser.core.report import AltimeterSetting, PressureUnit, TemperatureInfo
from metar_parser.core.tokens import RawToken
from metar_parser.decoders.base import first_token, parse_signed

_NOT_REPORTED = "/////"


def decode_temperature(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    context: ParseContext,
) -> Optional[TemperatureInfo]:
    """Decode TT/TD; "M" marks a negative value, "//" a missing one.

    A dew point above the temperature is reported but the values are kept.
    A "/////" group is dropped without an error when another temperature
    group carries a value.
    """
    reported = [token for token in tokens if token.text != _NOT_REPORTED]
    token = first_token(reported or tokens, errors, "temperature")
    if token is None:
        return None

    match = patterns.TEMPERATURE_RE.fullmatch(token.text)
    if match is None:
        errors.add("Temperature group {} is malformed, expected TT/TD".format(token.describe()))
        return None

    raw_temperature = match.group("temperature")
    raw_dew_point = match.group("dew_point")
    temperature = None if raw_temperature == "//" else parse_signed(raw_temperature)
    dew_point = None if raw_dew_point in (None, "//") else parse_signed(raw_dew_point)
    if temperature is not None and dew_point is not None and dew_point > temperature:
        errors.add("Dew point is above temperature in {}".format(token.describe()))

    return TemperatureInfo(temperature_c=temperature, dew_point_c=dew_point)


def decode_altimeter_setting(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    context: ParseContext,
) -> Optional[AltimeterSetting]:
    """Decode Qpppp (hPa) or Apppp (hundredths of inHg)."""
    token = first_token(tokens, errors, "altimeter setting")
    if token is None:
        return None

    match = patterns.ALTIMETER_RE.fullmatch(token.text)
    if match is None:
        errors.add("Altimeter setting {} is malformed or not reported".format(token.describe()))
        return None

    unit = PressureUnit(match.group("unit"))
    if unit is PressureUnit.HECTOPASCALS:
        value = float(match.group("value"))
        low, high = QNH_RANGE_HPA
    else:
        value = int(match.group("value")) / 100
        low, high = ALTIMETER_RANGE_INHG
    if not low <= value <= high:
        errors.add("Altimeter setting {} is out of range".format(token.describe()))
        return None

    return AltimeterSetting(value=value, unit=unit)
