"""Unit tests for present and recent weather decoders."""

from metar_parser.core.report import WeatherIntensity
from metar_parser.core.tokens import RawToken
from metar_parser.decoders.weather import decode_present_weather, decode_recent_weather


def _tokens(*texts):
    tokens, offset = [], 0
    for text in texts:
        tokens.append(RawToken(text, offset))
        offset += len(text) + 1
    return tokens


class TestPresentWeather:

    def test_heavy_thunderstorm_rain(self, errors, context):
        (condition,) = decode_present_weather(_tokens("+TSRA"), errors, context)
        assert condition.intensity is WeatherIntensity.HEAVY
        assert condition.descriptor == "TS"
        assert condition.phenomena == ("RA",)

    def test_light_mixed_precipitation(self, errors, context):
        (condition,) = decode_present_weather(_tokens("-RASN"), errors, context)
        assert condition.intensity is WeatherIntensity.LIGHT
        assert condition.descriptor is None
        assert condition.phenomena == ("RA", "SN")

    def test_no_prefix_is_moderate(self, errors, context):
        (condition,) = decode_present_weather(_tokens("BR"), errors, context)
        assert condition.intensity is WeatherIntensity.MODERATE

    def test_vicinity_descriptor_only(self, errors, context):
        (condition,) = decode_present_weather(_tokens("VCSH"), errors, context)
        assert condition.intensity is WeatherIntensity.IN_VICINITY
        assert condition.descriptor == "SH"
        assert condition.phenomena == ()

    def test_several_groups_keep_order(self, errors, context):
        result = decode_present_weather(_tokens("-SN", "BR"), errors, context)
        assert [c.phenomena for c in result] == [("SN",), ("BR",)]

    def test_invalid_code(self, errors, context):
        assert decode_present_weather([RawToken("+XX", 30)], errors, context) is None
        assert errors.freeze() == ("Weather group '+XX' at position 30 is not a valid weather code",)

    def test_intensity_alone_is_invalid(self, errors, context):
        assert decode_present_weather(_tokens("+"), errors, context) is None
        assert len(errors) == 1


class TestRecentWeather:

    def test_recent_thunderstorm(self, errors, context):
        (condition,) = decode_recent_weather(_tokens("RETSRA"), errors, context)
        assert condition.descriptor == "TS"
        assert condition.phenomena == ("RA",)
        assert condition.intensity is WeatherIntensity.MODERATE

    def test_recent_snow(self, errors, context):
        (condition,) = decode_recent_weather(_tokens("RESN"), errors, context)
        assert condition.phenomena == ("SN",)

    def test_bare_prefix_is_invalid(self, errors, context):
        assert decode_recent_weather(_tokens("RE"), errors, context) is None
        assert "Recent weather group 'RE'" in errors.freeze()[0]
