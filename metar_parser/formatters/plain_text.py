"""Plain text decode of a report.

WHY: Pilots and dispatchers reviewing a report want it spelled out
("Wind: 240° at 15 knots, gusting 25 knots") rather than coded. This is the
simplest formatter and the human-facing counterpart of the JSON output.

HOW: One "Label: text" line per present field, in Report field order,
using the code tables in config.py for wording. A final "Errors:" block
lists parse_errors, one per line, when there are any.

RULES:
- Absent fields produce no line
- Repeated groups (clouds, RVR, weather) are joined with "; "
- No trailing whitespace on any line; content ends with a newline
- Output suffix: "-metar.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from metar_parser.config import (
    CLOUD_COVERS,
    CONVECTIVE_CLOUDS,
    MODIFIERS,
    TREND_MARKERS,
    WEATHER_DESCRIPTORS,
    WEATHER_INTENSITIES,
    WEATHER_PHENOMENA,
    WIND_UNITS,
)
from metar_parser.core.report import (
    AltimeterSetting,
    CloudLayer,
    DistanceQualifier,
    PressureUnit,
    PrevailingVisibility,
    Report,
    RunwayCondition,
    RunwayVisualRange,
    SurfaceWind,
    TrendChange,
    WeatherCondition,
)
from metar_parser.formatters.base import BaseFormatter, FormatterOutput

_QUALIFIER_WORDS = {
    DistanceQualifier.ABOVE: "more than ",
    DistanceQualifier.BELOW: "less than ",
}


def _qualifier(qualifier: Optional[DistanceQualifier]) -> str:
    return _QUALIFIER_WORDS.get(qualifier, "")


def describe_wind(wind: SurfaceWind) -> str:
    unit = WIND_UNITS[wind.unit.value]
    if wind.is_calm:
        return "calm"
    if wind.is_variable:
        direction = "variable"
    elif wind.direction is None:
        direction = "direction not reported"
    else:
        direction = "{:03d}°".format(wind.direction)
    speed = "{} {}".format(wind.speed, unit) if wind.speed is not None else "speed not reported"
    text = "{} at {}".format(direction, speed)
    if wind.gust is not None:
        text += ", gusting {} {}".format(wind.gust, unit)
    if wind.variable_from is not None:
        text += ", varying between {:03d}° and {:03d}°".format(wind.variable_from, wind.variable_to)
    return text


def describe_visibility(visibility: PrevailingVisibility) -> str:
    if visibility.is_cavok:
        return "CAVOK (ceiling and visibility OK)"
    if visibility.distance_sm is not None:
        text = "{}{:g} statute miles".format(_qualifier(visibility.qualifier), visibility.distance_sm)
    elif visibility.distance_m == 9999:
        text = "10 km or more"
    else:
        text = "{} m".format(visibility.distance_m)
    if visibility.no_directional_variation:
        text += " (no directional variation)"
    if visibility.minimum_m is not None:
        text += ", minimum {} m to the {}".format(visibility.minimum_m, visibility.minimum_direction)
    return text


def describe_rvr(rvr: RunwayVisualRange) -> str:
    unit = "ft" if rvr.unit.value == "FT" else "m"
    text = "runway {}: {}{} {}".format(rvr.runway, _qualifier(rvr.qualifier), rvr.value, unit)
    if rvr.variable_max is not None:
        text += " to {}{} {}".format(_qualifier(rvr.variable_max_qualifier), rvr.variable_max, unit)
    if rvr.tendency is not None:
        text += " ({})".format(rvr.tendency.name.lower().replace("_", " "))
    return text


def describe_weather(condition: WeatherCondition) -> str:
    words: List[str] = []
    intensity = WEATHER_INTENSITIES.get(condition.intensity.value)
    if intensity and intensity != "in the vicinity":
        words.append(intensity)
    if condition.descriptor:
        words.append(WEATHER_DESCRIPTORS[condition.descriptor])
    words.extend(WEATHER_PHENOMENA[code] for code in condition.phenomena)
    if intensity == "in the vicinity":
        words.append(intensity)
    return " ".join(words)


def describe_cloud(layer: CloudLayer) -> str:
    cover = CLOUD_COVERS.get(layer.cover.value, "not reported")
    if layer.height_ft is not None:
        cover += " at {} ft".format(layer.height_ft)
    if layer.convective is not None:
        cover += " ({})".format(CONVECTIVE_CLOUDS[layer.convective.value])
    return cover


def describe_altimeter(setting: AltimeterSetting) -> str:
    if setting.unit is PressureUnit.HECTOPASCALS:
        return "{:g} hPa".format(setting.value)
    return "{:.2f} inHg".format(setting.value)


def describe_runway_condition(condition: RunwayCondition) -> str:
    if condition.is_closed:
        return "runway {}: closed due to snow".format(condition.runway)
    parts = []
    if condition.is_cleared:
        parts.append("contamination cleared")
    if condition.deposit:
        parts.append(condition.deposit)
    if condition.contamination:
        parts.append("covering " + condition.contamination)
    if condition.runway_not_operational:
        parts.append("not operational")
    elif condition.depth_mm is not None:
        parts.append("depth {} mm".format(condition.depth_mm))
    if condition.friction_coefficient is not None:
        parts.append("friction {:.2f}".format(condition.friction_coefficient))
    if condition.braking_action:
        parts.append("braking action " + condition.braking_action)
    return "runway {}: {}".format(condition.runway, ", ".join(parts) or "not reported")


def describe_trend_change(change: TrendChange) -> str:
    parts = [TREND_MARKERS[change.trend_type.value].lower()]
    for label, value in (("from", change.from_time), ("until", change.until_time), ("at", change.at_time)):
        if value is not None:
            parts.append("{} {}Z".format(label, value.strftime("%H%M")))
    if change.surface_wind is not None:
        parts.append("wind " + describe_wind(change.surface_wind))
    if change.prevailing_visibility is not None:
        parts.append("visibility " + describe_visibility(change.prevailing_visibility))
    if change.weather:
        parts.append(_join(describe_weather(w) for w in change.weather))
    if change.no_significant_weather:
        parts.append("no significant weather")
    if change.cloud_layers:
        parts.append("clouds " + _join(describe_cloud(c) for c in change.cloud_layers))
    return ", ".join(parts)


def _join(items) -> str:
    return "; ".join(items)


def _temperature_line(report: Report) -> Optional[str]:
    info = report.temperature
    if info is None:
        return None
    temperature = "{} °C".format(info.temperature_c) if info.temperature_c is not None else "not reported"
    dew_point = "{} °C".format(info.dew_point_c) if info.dew_point_c is not None else "not reported"
    return "{}, dew point {}".format(temperature, dew_point)


def report_lines(report: Report) -> List[str]:
    """Build the decoded lines for a report, without the error block."""
    lines: List[str] = []

    def add(label: str, text: Optional[str]) -> None:
        if text is not None:
            lines.append("{}: {}".format(label, text))

    add("Report type", report.report_type.value if report.report_type else None)
    add("Airport", report.airport)
    if report.observation_day_time is not None:
        add("Observed", report.observation_day_time.timestamp.strftime("%Y-%m-%d %H:%M UTC"))
    if report.modifiers:
        add("Modifiers", _join(MODIFIERS[m.value] for m in report.modifiers))
    if report.surface_wind is not None:
        add("Wind", describe_wind(report.surface_wind))
    if report.prevailing_visibility is not None:
        add("Visibility", describe_visibility(report.prevailing_visibility))
    if report.runway_visual_range:
        add("Runway visual range", _join(describe_rvr(r) for r in report.runway_visual_range))
    if report.present_weather:
        add("Weather", _join(describe_weather(w) for w in report.present_weather))
    if report.cloud_layers:
        add("Clouds", _join(describe_cloud(c) for c in report.cloud_layers))
    add("Temperature", _temperature_line(report))
    if report.altimeter_setting is not None:
        add("Pressure", describe_altimeter(report.altimeter_setting))
    if report.recent_weather:
        add("Recent weather", _join(describe_weather(w) for w in report.recent_weather))
    if report.wind_shear is not None:
        runways: Sequence[str] = report.wind_shear.runways
        add("Wind shear", "all runways" if report.wind_shear.all_runways else "runway " + ", ".join(runways))
    if report.runway_conditions:
        add("Runway state", _join(describe_runway_condition(c) for c in report.runway_conditions))
    if report.trend is not None:
        add("Trend", _join(describe_trend_change(c) for c in report.trend.changes))
    add("Remarks", report.remarks or None)
    return lines


class PlainTextFormatter(BaseFormatter):
    """Formatter that spells out a report line by line.

    RULES:
    - One "Label: text" line per present field
    - "Errors:" block with "- message" lines when parse_errors is non-empty
    - Output suffix: "-metar.txt"
    """

    @property
    def name(self) -> str:
        return "Plain Text"

    def format(self, report: Report) -> List[FormatterOutput]:
        lines = report_lines(report)
        if report.parse_errors:
            if lines:
                lines.append("")
            lines.append("Errors:")
            lines.extend("- " + message for message in report.parse_errors)

        content = "\n".join(lines)
        if content:
            content += "\n"

        return [
            FormatterOutput(
                suffix="-metar.txt",
                content=content,
                media_type="text/plain",
            )
        ]
