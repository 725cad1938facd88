"""Result models — calculator and booking-flow output contracts."""

from stay_pricing.models.results import (
    BookingQuote,
    BookingSubmission,
    DateIssue,
    DateRange,
    PaymentIntentRequest,
    PriceBreakdown,
    StayDuration,
)

__all__ = [
    "BookingQuote",
    "BookingSubmission",
    "DateIssue",
    "DateRange",
    "PaymentIntentRequest",
    "PriceBreakdown",
    "StayDuration",
]
