"""JSON report formatter.

WHY: Downstream tools (dashboards, archives, other languages) want the
decoded report as plain JSON rather than Python objects.

HOW: report_to_dict() walks the Report dataclass tree and converts each
value to a JSON-safe form. The formatter validates the result against
metar_report.schema.json with jsonschema before serialising it.

RULES:
- Every Report field is present in the output; absent fields are null
- Enums → their coded value ("KT", "BKN", "+"), Month → month number
- Datetimes → ISO-8601 UTC with a "Z" suffix, times → "HH:MM"
- Tuples → arrays, in source order
- Output suffix: "-metar.json"
- Schema validation is mandatory; raises on invalid output
"""

from __future__ import annotations

import dataclasses
import datetime as dt
import json
from enum import Enum
from pathlib import Path
from typing import Any

import jsonschema

from metar_parser.core.report import Report
from metar_parser.formatters.base import BaseFormatter, FormatterOutput

SCHEMA_PATH = Path(__file__).resolve().parent / "metar_report.schema.json"


def load_schema() -> dict[str, Any]:
    with open(SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


def _to_json_value(value: Any) -> Any:
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, dt.datetime):
        return value.astimezone(dt.timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    if isinstance(value, dt.time):
        return value.strftime("%H:%M")
    if isinstance(value, (tuple, list)):
        return [_to_json_value(item) for item in value]
    if dataclasses.is_dataclass(value):
        return {
            f.name: _to_json_value(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }
    raise TypeError("Cannot convert {} to JSON".format(type(value).__name__))


def report_to_dict(report: Report) -> dict[str, Any]:
    """Convert a Report into a JSON-safe dict."""
    return _to_json_value(report)


class JsonReportFormatter(BaseFormatter):
    """Formatter that serialises the whole Report as JSON."""

    @property
    def name(self) -> str:
        return "JSON"

    def format(self, report: Report) -> list[FormatterOutput]:
        """Convert a Report into a validated JSON document.

        Raises:
            jsonschema.ValidationError: If the generated JSON does not
                conform to metar_report.schema.json.
        """
        output = report_to_dict(report)
        jsonschema.validate(instance=output, schema=load_schema())
        content = json.dumps(output, indent=2, ensure_ascii=False)
        return [
            FormatterOutput(
                suffix="-metar.json",
                content=content,
                media_type="application/json",
            )
        ]
