"""Shared test fixtures for the metar_parser test suite.

WHY: Most test modules need the same handful of real-world reports and
the same parse context. Centralizing them here keeps expected values in
one place and avoids drift between modules.

HOW: Module-level constants hold the sample reports; fixtures provide a
fixed March 2026 context, a fresh ErrorSink, and an environment with no
rollover-policy override.

RULES:
- Sample reports are realistic METARs, not synthetic token soup.
- The default context is March 2026 with RolloverPolicy.NONE, so
  timestamps are deterministic regardless of the wall clock.
- METAR_ROLLOVER_POLICY is cleared for every test.
"""

import pytest

from metar_parser.core.context import Month, ParseContext, RolloverPolicy
from metar_parser.core.errors import ErrorSink


# ---------------------------------------------------------------------------
# Sample reports
# ---------------------------------------------------------------------------

# US station: statute miles, inHg, remarks.
KJFK_REPORT = (
    "METAR KJFK 211751Z 24015G25KT 10SM FEW040 BKN250 22/12 A3001 "
    "RMK AO2 SLP162 T02220122"
)

# European automatic station: variable sector, recent weather, NOSIG.
EGLL_REPORT = (
    "METAR EGLL 211750Z AUTO 24012KT 210V270 9999 -RA SCT015 BKN030CB "
    "15/09 Q1012 RERA NOSIG"
)

# CAVOK with a two-part trend.
LFPG_REPORT = (
    "METAR LFPG 211800Z 27010KT CAVOK 18/08 Q1015 "
    "BECMG FM1900 TL2000 30015KT 4000 BR TEMPO BKN008 NSW"
)

# Winter report: metres per second, RVR, wind shear, runway state.
UUEE_REPORT = (
    "METAR UUEE 211800Z 18005MPS 1200 R24/1100U SN OVC005 M02/M03 Q1008 "
    "RESN WS R24 R24/290050 NOSIG"
)

ALL_SAMPLE_REPORTS = (KJFK_REPORT, EGLL_REPORT, LFPG_REPORT, UUEE_REPORT)


@pytest.fixture(autouse=True)
def _no_rollover_override(monkeypatch):
    """Ignore any METAR_ROLLOVER_POLICY set in the developer's shell or .env."""
    monkeypatch.delenv("METAR_ROLLOVER_POLICY", raising=False)


@pytest.fixture
def context():
    """March 2026, no month rollover."""
    return ParseContext(current_month=Month.MARCH, year=2026)


@pytest.fixture
def rollover_context():
    """March 2026 as seen on the 2nd, with previous-month rollover."""
    return ParseContext(
        current_month=Month.MARCH,
        year=2026,
        reference_day=2,
        rollover_policy=RolloverPolicy.PREVIOUS_MONTH,
    )


@pytest.fixture
def errors():
    return ErrorSink()
