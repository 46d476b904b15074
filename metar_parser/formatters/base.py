"""Report formatter contract.

WHY: A decoded Report is consumed two ways: by programs that want
structured JSON and by people reading a plain decode. Both read the same
frozen Report, so they share one small interface and the FORMATTERS
registry can hand out either by key.

HOW: A formatter has a ``name`` and a ``format()`` that turns one Report
into rendered text. The text travels in a FormatterOutput together with
its media type.

RULES:
- ``format()`` never mutates the Report
- ``format()`` returns a list; both formatters return exactly one item
- Reports with parse errors are rendered too, errors included
- ``suffix`` is only a naming hint; formatters never touch the filesystem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from metar_parser.core.report import Report


@dataclass
class FormatterOutput:
    """Rendered report text.

    Attributes:
        suffix: Naming hint such as ``"-metar.json"`` for callers that store
                the content.
        content: The rendered report.
        media_type: MIME type of content.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Renders a Report. Register new subclasses in FORMATTERS."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name, e.g. 'JSON'."""

    @abstractmethod
    def format(self, report: Report) -> list[FormatterOutput]:
        """Render a Report."""
