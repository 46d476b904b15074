"""Report assembly: tokenize, classify, decode every field, build the Report.

WHY: Callers want one call that turns a METAR string into a Report and
never throws for bad weather text. This module is the bridge between
the flat token stream and the typed Report.

HOW: tokenize() → classify() → short-circuit if nothing was recognised →
run each DecoderEntry in registry order against its token group with a
single shared ErrorSink → freeze everything into a Report.

RULES:
- No recognised group at all → Report with only raw text and the
  single error "No groups found in report text"
- A failing decoder never stops the others
- parse_errors order = decoder order
- None input → TypeError (the only exception for a string argument)
- Each call owns its tokens, groups, and sink; nothing is cached
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from metar_parser.core.classifier import classify
from metar_parser.core.context import Month, ParseContext
from metar_parser.core.errors import ErrorSink
from metar_parser.core.report import Report
from metar_parser.core.tokenizer import tokenize
from metar_parser.decoders import DECODERS

logger = logging.getLogger(__name__)

NO_GROUPS_ERROR = "No groups found in report text"


def _resolve_context(
    current_month: Optional[Union[Month, int]],
    context: Optional[ParseContext],
) -> ParseContext:
    if context is not None:
        if not isinstance(context, ParseContext):
            raise TypeError("context must be a ParseContext, not {}".format(type(context).__name__))
        if current_month is not None and context.current_month != current_month:
            raise ValueError("current_month and context.current_month disagree")
        return context
    if current_month is None:
        raise TypeError("parse() needs current_month or context")
    return ParseContext.for_month(current_month)


def parse(
    report_text: str,
    current_month: Optional[Union[Month, int]] = None,
    context: Optional[ParseContext] = None,
) -> Report:
    """Parse one raw METAR string into a Report.

    Args:
        report_text: The raw report, e.g. "METAR KJFK 211751Z 24015KT ...".
        current_month: Month the report belongs to. Shortcut for
                       ParseContext.for_month(current_month).
        context: Full parse context (year, reference day, rollover
                 policy). Takes precedence over current_month.

    Returns:
        A Report. Fields that could not be decoded are None and each
        problem is listed in Report.parse_errors.
    """
    parse_context = _resolve_context(current_month, context)
    tokens = tokenize(report_text)
    grouped = classify(tokens)

    if not grouped.has_recognized_groups():
        logger.debug("No METAR groups recognised in %r", report_text)
        return Report(raw=report_text, parse_errors=(NO_GROUPS_ERROR,))

    errors = ErrorSink()
    fields: Dict[str, Any] = {}
    for entry in DECODERS:
        fields[entry.field_name] = entry.decoder(grouped.group(entry.token_type), errors, parse_context)

    report = Report(
        raw=report_text,
        month=parse_context.current_month,
        parse_errors=errors.freeze(),
        **fields,
    )
    logger.debug(
        "Parsed METAR for %s: %d group type(s), %d error(s)",
        report.airport, len(grouped), len(report.parse_errors),
    )
    return report


def parse_many(
    report_texts: Iterable[str],
    current_month: Optional[Union[Month, int]] = None,
    context: Optional[ParseContext] = None,
) -> List[Report]:
    """Parse several reports against the same context, preserving order."""
    if report_texts is None:
        raise TypeError("report_texts must be an iterable of strings, not None")
    parse_context = _resolve_context(current_month, context)
    return [parse(text, context=parse_context) for text in report_texts]
