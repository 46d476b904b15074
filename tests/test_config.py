"""Unit tests for configuration loading and the code tables.

WHY: A typo in METAR_ROLLOVER_POLICY must fail loudly rather than fall
back to a policy the deployment did not ask for. The code tables feed
both the regexes and the plain-text wording, so gaps show up as
unrecognized groups.

HOW: monkeypatch sets and clears the environment variable; table tests
check the entries the decoders depend on.
"""

import pytest

from metar_parser.config import (
    CLOUD_COVERS,
    DEFAULT_ROLLOVER_POLICY,
    RUNWAY_CONTAMINATION,
    RUNWAY_DEPOSITS,
    TREND_MARKERS,
    WEATHER_DESCRIPTORS,
    WEATHER_PHENOMENA,
    load_rollover_policy,
)


class TestLoadRolloverPolicy:

    def test_missing_variable_gives_default(self):
        assert load_rollover_policy() == DEFAULT_ROLLOVER_POLICY == "none"

    def test_empty_variable_gives_default(self, monkeypatch):
        monkeypatch.setenv("METAR_ROLLOVER_POLICY", "   ")
        assert load_rollover_policy() == "none"

    def test_value_is_normalized(self, monkeypatch):
        monkeypatch.setenv("METAR_ROLLOVER_POLICY", "  Previous_Month ")
        assert load_rollover_policy() == "previous_month"

    def test_unknown_value_raises(self, monkeypatch):
        monkeypatch.setenv("METAR_ROLLOVER_POLICY", "next_month")
        with pytest.raises(ValueError, match="METAR_ROLLOVER_POLICY"):
            load_rollover_policy()


class TestCodeTables:

    def test_weather_codes_are_two_letters(self):
        for code in list(WEATHER_DESCRIPTORS) + list(WEATHER_PHENOMENA):
            assert len(code) == 2

    def test_descriptors_and_phenomena_do_not_overlap(self):
        assert not set(WEATHER_DESCRIPTORS) & set(WEATHER_PHENOMENA)

    def test_trend_markers(self):
        assert set(TREND_MARKERS) == {"NOSIG", "BECMG", "TEMPO"}

    def test_cloud_covers_include_vertical_visibility(self):
        assert "VV" in CLOUD_COVERS

    def test_runway_tables_cover_not_reported(self):
        assert "/" in RUNWAY_DEPOSITS
        assert "/" in RUNWAY_CONTAMINATION
