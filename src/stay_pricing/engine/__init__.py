"""Engine — date validation, stay duration and pricing."""

from stay_pricing.engine.dates import validate_date_range, ensure_valid_date_range
from stay_pricing.engine.duration import months_between, days_between, stay_duration
from stay_pricing.engine.pricing import compute_price_breakdown, price_stay
from stay_pricing.engine.quote import quote_stay, build_booking_submission, build_payment_intent

__all__ = [
    "validate_date_range",
    "ensure_valid_date_range",
    "months_between",
    "days_between",
    "stay_duration",
    "compute_price_breakdown",
    "price_stay",
    # Booking flow
    "quote_stay",
    "build_booking_submission",
    "build_payment_intent",
]
