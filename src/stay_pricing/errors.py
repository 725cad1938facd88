"""Error taxonomy for the booking price & date checks.

Date errors are user-recoverable: the validator hands them back so the
booking form can show the message next to the offending field.
``InvalidInputError`` is a caller bug and is always raised.
"""

from __future__ import annotations

from stay_pricing.models.results import DateIssue


class StayPricingError(Exception):
    """Base class for everything this package raises."""


class DateRangeError(StayPricingError):
    """A stay window the user has to correct before booking."""

    code: str = "invalid_dates"
    field: str = "check_out"
    default_message: str = "Invalid date selection"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_issue(self) -> DateIssue:
        return DateIssue(code=self.code, field=self.field, message=self.message)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.message == self.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class PastCheckInError(DateRangeError):
    """Check-in is earlier than the reference day."""

    code = "past_check_in"
    field = "check_in"
    default_message = "Check-in date cannot be in the past"


class InvalidRangeError(DateRangeError):
    """Check-out is on or before check-in."""

    code = "invalid_range"
    field = "check_out"
    default_message = "Check-out date must be after check-in date"


class InvalidInputError(StayPricingError, ValueError):
    """Negative, non-finite or non-numeric input handed in by a caller."""


DATE_ERRORS: dict[str, type[DateRangeError]] = {
    DateRangeError.code: DateRangeError,
    PastCheckInError.code: PastCheckInError,
    InvalidRangeError.code: InvalidRangeError,
}


def date_error_from_issue(issue: DateIssue) -> DateRangeError:
    """Rebuild the typed error from its serialised form."""
    return DATE_ERRORS[issue.code](issue.message)
