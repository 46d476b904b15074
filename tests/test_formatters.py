"""Unit tests for all formatter modules.

WHY: Formatters are what downstream tools and people actually read. An
invalid JSON document breaks consumers; a wrong plain-text line misleads
a reader about the weather.

HOW: Sample reports are parsed against the conftest context and run
through each formatter:
  - JSON: schema validation, field conversion, null for absent fields
  - Plain text: one labelled line per present field, error block

RULES:
- Schema validation uses metar_report.schema.json shipped with the package.
- Reports come from parse(), not hand-built Report objects, except where
  a specific edge case is needed.
"""

import json

import jsonschema
import pytest

from metar_parser import parse
from metar_parser.core.report import Report
from metar_parser.formatters import FORMATTERS
from metar_parser.formatters.base import BaseFormatter
from metar_parser.formatters.json_report import (
    SCHEMA_PATH,
    JsonReportFormatter,
    load_schema,
    report_to_dict,
)
from metar_parser.formatters.plain_text import PlainTextFormatter, describe_visibility, describe_wind

from conftest import ALL_SAMPLE_REPORTS, EGLL_REPORT, KJFK_REPORT, LFPG_REPORT, UUEE_REPORT


class TestRegistry:

    def test_formatter_names(self):
        assert set(FORMATTERS) == {"json", "plain_text"}

    def test_all_are_formatters(self):
        for formatter_cls in FORMATTERS.values():
            assert issubclass(formatter_cls, BaseFormatter)
            assert formatter_cls().name


class TestJsonFormatter:
    """JSON output validates against the bundled schema."""

    def test_schema_file_ships_with_package(self):
        assert SCHEMA_PATH.is_file()
        jsonschema.Draft7Validator.check_schema(load_schema())

    @pytest.mark.parametrize("text", ALL_SAMPLE_REPORTS)
    def test_sample_reports_validate(self, text, context):
        (output,) = JsonReportFormatter().format(parse(text, context=context))
        data = json.loads(output.content)
        jsonschema.validate(instance=data, schema=load_schema())

    def test_output_metadata(self, context):
        (output,) = JsonReportFormatter().format(parse(KJFK_REPORT, context=context))
        assert output.suffix == "-metar.json"
        assert output.media_type == "application/json"

    def test_field_conversion(self, context):
        data = report_to_dict(parse(KJFK_REPORT, context=context))
        assert data["report_type"] == "METAR"
        assert data["month"] == 3
        assert data["observation_day_time"]["timestamp"] == "2026-03-21T17:51:00Z"
        assert data["surface_wind"]["unit"] == "KT"
        assert data["cloud_layers"] == [
            {"cover": "FEW", "height_ft": 4000, "convective": None},
            {"cover": "BKN", "height_ft": 25000, "convective": None},
        ]
        assert data["altimeter_setting"]["unit"] == "A"
        assert data["parse_errors"] == []

    def test_absent_fields_are_null(self, context):
        data = report_to_dict(parse(KJFK_REPORT, context=context))
        assert data["trend"] is None
        assert data["runway_visual_range"] is None
        assert data["modifiers"] is None

    def test_trend_times(self, context):
        data = report_to_dict(parse(LFPG_REPORT, context=context))
        becoming = data["trend"]["changes"][0]
        assert becoming["trend_type"] == "BECMG"
        assert becoming["from_time"] == "19:00"
        assert becoming["until_time"] == "20:00"

    def test_moderate_intensity_is_empty_string(self, context):
        data = report_to_dict(parse(UUEE_REPORT, context=context))
        assert data["present_weather"][0]["intensity"] == ""

    def test_no_groups_report_validates(self, context):
        (output,) = JsonReportFormatter().format(parse("", context=context))
        data = json.loads(output.content)
        assert data["parse_errors"] == ["No groups found in report text"]
        assert data["airport"] is None

    def test_invalid_report_raises(self):
        report = Report(raw="X", airport=42)
        with pytest.raises(jsonschema.ValidationError):
            JsonReportFormatter().format(report)


class TestPlainTextFormatter:
    """Plain text spells the report out as "Label: text" lines."""

    def test_kjfk_lines(self, context):
        (output,) = PlainTextFormatter().format(parse(KJFK_REPORT, context=context))
        lines = output.content.splitlines()
        assert lines[0] == "Report type: METAR"
        assert "Airport: KJFK" in lines
        assert "Observed: 2026-03-21 17:51 UTC" in lines
        assert "Wind: 240° at 15 knots, gusting 25 knots" in lines
        assert "Visibility: 10 statute miles" in lines
        assert "Clouds: few at 4000 ft; broken at 25000 ft" in lines
        assert "Temperature: 22 °C, dew point 12 °C" in lines
        assert "Pressure: 30.01 inHg" in lines
        assert "Remarks: AO2 SLP162 T02220122" in lines
        assert "Errors:" not in lines

    def test_output_metadata(self, context):
        (output,) = PlainTextFormatter().format(parse(KJFK_REPORT, context=context))
        assert output.suffix == "-metar.txt"
        assert output.media_type == "text/plain"
        assert output.content.endswith("\n")

    def test_egll_lines(self, context):
        (output,) = PlainTextFormatter().format(parse(EGLL_REPORT, context=context))
        lines = output.content.splitlines()
        assert "Wind: 240° at 12 knots, varying between 210° and 270°" in lines
        assert "Visibility: 10 km or more" in lines
        assert "Weather: light rain" in lines
        assert "Clouds: scattered at 1500 ft; broken at 3000 ft (cumulonimbus)" in lines
        assert "Pressure: 1012 hPa" in lines
        assert "Recent weather: rain" in lines
        assert "Trend: no significant change" in lines

    def test_trend_line(self, context):
        (output,) = PlainTextFormatter().format(parse(LFPG_REPORT, context=context))
        trend_line = next(line for line in output.content.splitlines() if line.startswith("Trend:"))
        assert trend_line.startswith("Trend: becoming, from 1900Z, until 2000Z, wind 300° at 15 knots")
        assert "temporarily, no significant weather, clouds broken at 800 ft" in trend_line

    def test_error_block(self, context):
        (output,) = PlainTextFormatter().format(parse("KJFK 99XXZ", context=context))
        lines = output.content.splitlines()
        assert lines[0] == "Airport: KJFK"
        assert lines[-2] == "Errors:"
        assert lines[-1].startswith("- Observation time '99XXZ'")

    def test_no_trailing_whitespace(self, context):
        for text in ALL_SAMPLE_REPORTS:
            (output,) = PlainTextFormatter().format(parse(text, context=context))
            for line in output.content.splitlines():
                assert line == line.rstrip()


class TestDescribeHelpers:

    def test_calm_wind(self, context):
        report = parse("KJFK 211751Z 00000KT", context=context)
        assert describe_wind(report.surface_wind) == "calm"

    def test_cavok(self, context):
        report = parse("LFPG 211800Z 27010KT CAVOK", context=context)
        assert describe_visibility(report.prevailing_visibility) == "CAVOK (ceiling and visibility OK)"
