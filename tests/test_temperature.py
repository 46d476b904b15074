"""Unit tests for temperature and altimeter decoders."""

import pytest

from metar_parser.core.report import PressureUnit
from metar_parser.core.tokens import RawToken
from metar_parser.decoders.temperature import decode_altimeter_setting, decode_temperature


def _tokens(*texts):
    tokens, offset = [], 0
    for text in texts:
        tokens.append(RawToken(text, offset))
        offset += len(text) + 1
    return tokens


class TestTemperature:

    def test_positive(self, errors, context):
        info = decode_temperature(_tokens("22/12"), errors, context)
        assert (info.temperature_c, info.dew_point_c) == (22, 12)

    def test_negative(self, errors, context):
        info = decode_temperature(_tokens("M02/M05"), errors, context)
        assert (info.temperature_c, info.dew_point_c) == (-2, -5)

    def test_missing_dew_point(self, errors, context):
        info = decode_temperature(_tokens("15/"), errors, context)
        assert info.temperature_c == 15
        assert info.dew_point_c is None

    def test_not_reported(self, errors, context):
        info = decode_temperature(_tokens("/////"), errors, context)
        assert info.temperature_c is None
        assert info.dew_point_c is None
        assert len(errors) == 0

    def test_valued_group_wins_over_not_reported(self, errors, context):
        info = decode_temperature(_tokens("/////", "15/09"), errors, context)
        assert (info.temperature_c, info.dew_point_c) == (15, 9)
        assert len(errors) == 0

    def test_dew_point_above_temperature_is_reported(self, errors, context):
        info = decode_temperature(_tokens("10/12"), errors, context)
        assert (info.temperature_c, info.dew_point_c) == (10, 12)
        assert "Dew point is above temperature" in errors.freeze()[0]

    def test_single_digit_is_malformed(self, errors, context):
        assert decode_temperature(_tokens("5/3"), errors, context) is None
        assert "expected TT/TD" in errors.freeze()[0]


class TestAltimeterSetting:

    def test_hectopascals(self, errors, context):
        setting = decode_altimeter_setting(_tokens("Q1013"), errors, context)
        assert setting.value == 1013.0
        assert setting.unit is PressureUnit.HECTOPASCALS

    def test_inches_of_mercury(self, errors, context):
        setting = decode_altimeter_setting(_tokens("A2992"), errors, context)
        assert setting.value == pytest.approx(29.92)
        assert setting.unit is PressureUnit.INCHES_OF_MERCURY

    def test_out_of_range(self, errors, context):
        assert decode_altimeter_setting(_tokens("Q0500"), errors, context) is None
        assert "out of range" in errors.freeze()[0]

    def test_not_reported(self, errors, context):
        assert decode_altimeter_setting(_tokens("Q////"), errors, context) is None
        assert "malformed or not reported" in errors.freeze()[0]
