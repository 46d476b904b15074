"""Report formatter registry.

WHY: Callers need a single lookup to find a formatter by name. A
central dict makes adding a format trivial: create the formatter class,
import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["json"]()``.

RULES:
- Keys are snake_case identifiers
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from metar_parser.formatters.json_report import JsonReportFormatter
from metar_parser.formatters.plain_text import PlainTextFormatter

if TYPE_CHECKING:
    from metar_parser.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "json": JsonReportFormatter,
    "plain_text": PlainTextFormatter,
}
