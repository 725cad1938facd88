"""Stay-window validation.

Pure check of a check-in / check-out pair against an injected "today".
Only the calendar day counts: datetimes are truncated to their date before
comparing, so 23:59 on the check-in day is still "today".
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from stay_pricing.errors import (
    DateRangeError,
    InvalidInputError,
    InvalidRangeError,
    PastCheckInError,
)

logger = logging.getLogger(__name__)


def as_calendar_date(value: date | datetime, name: str = "date") -> date:
    """Drop any time-of-day component."""
    # datetime is a subclass of date, so test it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    logger.warning("Rejected non-date %s: %r", name, value)
    raise InvalidInputError(f"{name} must be a date, got {type(value).__name__}")


def validate_date_range(
    check_in: date | datetime,
    check_out: date | datetime,
    today: date | datetime,
) -> DateRangeError | None:
    """Return the first problem with a stay window, or ``None`` if it is bookable.

    - check-in before today → ``PastCheckInError`` (whatever check-out is)
    - check-out on or before check-in → ``InvalidRangeError``
    - check-in == today is fine.
    """
    check_in = as_calendar_date(check_in, "check_in")
    check_out = as_calendar_date(check_out, "check_out")
    today = as_calendar_date(today, "today")

    if check_in < today:
        return PastCheckInError()
    if check_out <= check_in:
        return InvalidRangeError()
    return None


def ensure_valid_date_range(
    check_in: date | datetime,
    check_out: date | datetime,
    today: date | datetime,
) -> None:
    """Same as :func:`validate_date_range` but raises the error."""
    error = validate_date_range(check_in, check_out, today)
    if error is not None:
        raise error
