"""Booking flow — quote, submission payload, payment-intent amount.

``quote_stay`` is what the booking form recomputes on every edit: it
always prices the stay (the summary keeps updating while the user fixes
their dates) but marks the quote as not submittable when the dates fail
validation. The two payload builders refuse such quotes.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from stay_pricing.config.booking import PricingInput, PropertyRates, StayRequest
from stay_pricing.config.pricing import PricingConfig
from stay_pricing.engine.dates import validate_date_range
from stay_pricing.engine.duration import stay_duration
from stay_pricing.engine.pricing import price_stay, round_money
from stay_pricing.errors import InvalidInputError, date_error_from_issue
from stay_pricing.models.results import (
    BookingQuote,
    BookingSubmission,
    DateRange,
    PaymentIntentRequest,
)

logger = logging.getLogger(__name__)


def quote_stay(
    rates: PropertyRates,
    request: StayRequest,
    today: date | datetime,
    config: PricingConfig | None = None,
) -> BookingQuote:
    """Validate the dates, derive the billable months and price the stay."""
    cfg = config or PricingConfig()

    date_error = validate_date_range(request.check_in, request.check_out, today)
    duration = stay_duration(request.check_in, request.check_out)
    pricing = PricingInput(
        monthly_rate=rates.monthly_rate,
        security_deposit=rates.security_deposit,
        platform_fee=cfg.platform_fee,
        payment_plan=request.payment_plan,
    )
    breakdown = price_stay(pricing, duration, cfg)

    if date_error is not None:
        logger.debug(
            "Quote blocked (%s): check_in=%s check_out=%s today=%s",
            date_error.code, request.check_in, request.check_out, today,
        )
    else:
        logger.debug(
            "Quote: %d month(s), plan=%s, total=%s",
            duration.months, request.payment_plan.value, breakdown.total,
        )

    return BookingQuote(
        date_range=DateRange(check_in=request.check_in, check_out=request.check_out),
        payment_plan=request.payment_plan,
        duration=duration,
        breakdown=breakdown,
        date_issue=date_error.to_issue() if date_error is not None else None,
    )


def _require_submittable(quote: BookingQuote) -> None:
    if quote.date_issue is not None:
        raise date_error_from_issue(quote.date_issue)
    if quote.breakdown.total < 0:
        raise InvalidInputError(f"refusing to book a negative total: {quote.breakdown.total}")


def build_booking_submission(
    property_id: str,
    request: StayRequest,
    quote: BookingQuote,
) -> BookingSubmission:
    """Payload for the booking-creation call.

    Raises the quote's ``DateRangeError`` if its dates did not validate.
    """
    _require_submittable(quote)
    if (request.check_in, request.check_out) != (quote.date_range.check_in, quote.date_range.check_out):
        raise InvalidInputError("quote was computed for different dates than the request")
    if request.payment_plan != quote.payment_plan:
        raise InvalidInputError("quote was computed for a different payment plan than the request")

    return BookingSubmission(
        property_id=property_id,
        check_in=request.check_in,
        check_out=request.check_out,
        payment_plan=request.payment_plan,
        total_amount=str(quote.breakdown.total),
        special_requests=request.special_requests,
    )


def build_payment_intent(
    booking_id: str,
    quote: BookingQuote,
    config: PricingConfig | None = None,
) -> PaymentIntentRequest:
    """Amount to charge for a booking, in major and minor currency units."""
    cfg = config or PricingConfig()
    _require_submittable(quote)

    amount = round_money(quote.breakdown.total, cfg.minor_unit_places)
    amount_minor = int(amount.scaleb(cfg.minor_unit_places))
    return PaymentIntentRequest(
        booking_id=booking_id,
        amount=amount,
        amount_minor=amount_minor,
        currency=cfg.currency,
    )
