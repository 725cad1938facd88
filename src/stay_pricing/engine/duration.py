"""Stay length — calendar months billed, plus the day span for display.

Billing is month-granular: only the year and month of each date matter.
Anything that comes out at zero or below (same-month stays, or a
check-out before check-in that validation has not caught yet) bills as
one month.
"""

from __future__ import annotations

from datetime import date, datetime

from stay_pricing.engine.dates import as_calendar_date
from stay_pricing.models.results import StayDuration

MINIMUM_BILLED_MONTHS = 1


def months_between(check_in: date | datetime, check_out: date | datetime) -> int:
    """Whole calendar months from check-in to check-out, at least 1.

    >>> months_between(date(2025, 1, 10), date(2025, 4, 10))
    3
    >>> months_between(date(2025, 1, 5), date(2025, 1, 6))
    1
    """
    check_in = as_calendar_date(check_in, "check_in")
    check_out = as_calendar_date(check_out, "check_out")

    months = (check_out.year - check_in.year) * 12 + (check_out.month - check_in.month)
    return months if months > 0 else MINIMUM_BILLED_MONTHS


def days_between(check_in: date | datetime, check_out: date | datetime) -> int:
    """Absolute number of calendar days between the two dates."""
    check_in = as_calendar_date(check_in, "check_in")
    check_out = as_calendar_date(check_out, "check_out")
    return abs((check_out - check_in).days)


def stay_duration(check_in: date | datetime, check_out: date | datetime) -> StayDuration:
    return StayDuration(
        months=months_between(check_in, check_out),
        days=days_between(check_in, check_out),
    )
