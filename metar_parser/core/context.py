"""Ambient parse context: current month, year, and month-rollover policy.

WHY: The observation time group carries only day, hour, and minute
("211751Z"). Turning it into a concrete timestamp needs the month and
year from the caller, and near a month boundary it needs a rule for
reports dated later than "today". That rule is a policy the caller
chooses, not something the decoder should guess.

HOW: ParseContext is a frozen dataclass built by the caller (or by
for_month() / from_datetime()). resolve_month() applies the rollover
policy to a report day and returns the (year, month) it belongs to.

RULES:
- RolloverPolicy.NONE: every day belongs to current_month of year
- RolloverPolicy.PREVIOUS_MONTH: a day later than reference_day belongs
  to the previous month (January rolls back to December of year - 1)
- PREVIOUS_MONTH without a reference_day behaves like NONE
- The default policy comes from METAR_ROLLOVER_POLICY (see config.py)
- current_month may be given as an int 1-12 and is stored as a Month;
  anything else raises TypeError or ValueError at construction
- A context never changes during a parse
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple, Union

from metar_parser.config import load_rollover_policy


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class RolloverPolicy(Enum):
    NONE = "none"
    PREVIOUS_MONTH = "previous_month"


def default_rollover_policy() -> RolloverPolicy:
    return RolloverPolicy(load_rollover_policy())


def _coerce_month(value: Union[Month, int]) -> Month:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("current_month must be a Month or an int, not {}".format(
            type(value).__name__,
        ))
    try:
        return Month(value)
    except ValueError:
        raise ValueError("current_month must be between 1 and 12, got {}".format(value)) from None


@dataclass(frozen=True)
class ParseContext:
    """Read-only facts a decoder may need to disambiguate a report.

    Attributes:
        current_month: Month the report is assumed to belong to.
        year: Calendar year used to build timestamps.
        reference_day: "Today" as day of month, used by PREVIOUS_MONTH.
        rollover_policy: How to place a day later than reference_day.
    """

    current_month: Month
    year: int
    reference_day: Optional[int] = None
    rollover_policy: RolloverPolicy = RolloverPolicy.NONE

    def __post_init__(self) -> None:
        # Plain ints are accepted; decoders rely on Month.
        object.__setattr__(self, "current_month", _coerce_month(self.current_month))

    @classmethod
    def for_month(
        cls,
        current_month: Union[Month, int],
        year: Optional[int] = None,
        reference_day: Optional[int] = None,
        rollover_policy: Optional[RolloverPolicy] = None,
    ) -> "ParseContext":
        """Build a context for a given month.

        RULES:
        - year defaults to the current UTC year
        - rollover_policy defaults to the configured policy
        """
        if year is None:
            year = dt.datetime.now(dt.timezone.utc).year
        if rollover_policy is None:
            rollover_policy = default_rollover_policy()
        return cls(
            current_month=_coerce_month(current_month),
            year=year,
            reference_day=reference_day,
            rollover_policy=rollover_policy,
        )

    @classmethod
    def from_datetime(
        cls,
        now: dt.datetime,
        rollover_policy: Optional[RolloverPolicy] = None,
    ) -> "ParseContext":
        """Build a context from a wall-clock instant, with reference_day = now.day."""
        return cls.for_month(
            now.month,
            year=now.year,
            reference_day=now.day,
            rollover_policy=rollover_policy,
        )

    def resolve_month(self, day: int) -> Tuple[int, Month]:
        """Return the (year, month) a report day belongs to under the policy."""
        if (
            self.rollover_policy is RolloverPolicy.PREVIOUS_MONTH
            and self.reference_day is not None
            and day > self.reference_day
        ):
            if self.current_month is Month.JANUARY:
                return self.year - 1, Month.DECEMBER
            return self.year, Month(self.current_month - 1)
        return self.year, self.current_month
