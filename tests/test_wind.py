"""Unit tests for the surface wind decoder."""

from metar_parser.core.report import WindUnit
from metar_parser.core.tokens import RawToken
from metar_parser.decoders.wind import decode_surface_wind


def _tokens(*texts):
    tokens, offset = [], 0
    for text in texts:
        tokens.append(RawToken(text, offset))
        offset += len(text) + 1
    return tokens


class TestWindGroup:

    def test_direction_speed_gust(self, errors, context):
        wind = decode_surface_wind(_tokens("24015G25KT"), errors, context)
        assert wind.direction == 240
        assert wind.speed == 15
        assert wind.gust == 25
        assert wind.unit is WindUnit.KNOTS
        assert not wind.is_variable
        assert len(errors) == 0

    def test_metres_per_second(self, errors, context):
        wind = decode_surface_wind(_tokens("18005MPS"), errors, context)
        assert (wind.direction, wind.speed, wind.unit) == (180, 5, WindUnit.METRES_PER_SECOND)

    def test_three_digit_speed(self, errors, context):
        wind = decode_surface_wind(_tokens("270105G130KT"), errors, context)
        assert (wind.speed, wind.gust) == (105, 130)

    def test_variable_direction(self, errors, context):
        wind = decode_surface_wind(_tokens("VRB03KT"), errors, context)
        assert wind.is_variable
        assert wind.direction is None
        assert wind.speed == 3

    def test_calm(self, errors, context):
        wind = decode_surface_wind(_tokens("00000KT"), errors, context)
        assert wind.is_calm

    def test_not_reported(self, errors, context):
        wind = decode_surface_wind(_tokens("/////KT"), errors, context)
        assert wind.direction is None
        assert wind.speed is None
        assert len(errors) == 0

    def test_absent(self, errors, context):
        assert decode_surface_wind([], errors, context) is None
        assert len(errors) == 0


class TestVariableSector:

    def test_sector_after_wind(self, errors, context):
        wind = decode_surface_wind(_tokens("24012KT", "210V270"), errors, context)
        assert (wind.variable_from, wind.variable_to) == (210, 270)

    def test_sector_without_wind(self, errors, context):
        assert decode_surface_wind(_tokens("210V270"), errors, context) is None
        assert "without a wind group" in errors.freeze()[0]

    def test_sector_out_of_range_keeps_wind(self, errors, context):
        wind = decode_surface_wind(_tokens("24012KT", "210V370"), errors, context)
        assert wind.direction == 240
        assert wind.variable_from is None
        assert len(errors) == 1


class TestWindErrors:

    def test_direction_out_of_range(self, errors, context):
        assert decode_surface_wind(_tokens("37010KT"), errors, context) is None
        assert "direction 370 is out of range" in errors.freeze()[0]

    def test_gust_not_above_speed(self, errors, context):
        assert decode_surface_wind(_tokens("24015G10KT"), errors, context) is None
        assert "gust 10 is not above mean speed 15" in errors.freeze()[0]

    def test_malformed(self, errors, context):
        assert decode_surface_wind([RawToken("240XXKT", 13)], errors, context) is None
        assert errors.freeze() == (
            "Wind group '240XXKT' at position 13 is malformed, expected dddff[Gff]KT",
        )

    def test_second_wind_group_is_reported(self, errors, context):
        wind = decode_surface_wind(_tokens("24015KT", "25020KT"), errors, context)
        assert wind.speed == 15
        assert "additional wind group" in errors.freeze()[0]
