"""METAR parser: raw aviation weather reports into typed Report objects.

WHY: A METAR is a terse, fixed-grammar string ("KJFK 211751Z 24015G25KT
10SM FEW040 BKN250 22/12 A3001"). Consumers need typed values, and they
need a result even when a group is missing or garbled.

HOW: Three-stage pipeline: tokenize, classify into typed groups, decode
each group with its own decoder. Decoders record problems instead of
raising, so every parse returns a Report with its parse_errors.

RULES:
- parse() never raises for malformed weather text
- Every Report field is optional; parse_errors is always present
- Formatters consume Report objects only
"""

from metar_parser.core.assembler import parse, parse_many
from metar_parser.core.context import Month, ParseContext, RolloverPolicy
from metar_parser.core.report import Report

__version__ = "0.1.0"

__all__ = [
    "Month",
    "ParseContext",
    "Report",
    "RolloverPolicy",
    "parse",
    "parse_many",
]
