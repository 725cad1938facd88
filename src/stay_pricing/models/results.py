"""Result types — what the booking flow reads back from the calculators.

Every model here is a throwaway value object: rebuilt on each edit of the
booking form and discarded once the booking is submitted or abandoned.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, computed_field

from stay_pricing.config.plans import PaymentPlan


# ═══════════════════════════════════════════════════════════════════════════
# Dates & duration
# ═══════════════════════════════════════════════════════════════════════════

class DateRange(BaseModel):
    """Raw check-in / check-out pair. Ordering is only guaranteed once validated."""

    check_in: date
    check_out: date


class DateIssue(BaseModel):
    """Serialisable form of a date validation error."""

    code: Literal["past_check_in", "invalid_range", "invalid_dates"]
    field: Literal["check_in", "check_out"]
    message: str


class StayDuration(BaseModel):
    """Billable length of a stay."""

    months: int = Field(ge=1)
    """Whole calendar months billed; never below 1."""

    days: int = Field(default=0, ge=0)
    """Calendar-day span. Shown to the user, not used for billing."""


# ═══════════════════════════════════════════════════════════════════════════
# Pricing
# ═══════════════════════════════════════════════════════════════════════════

class PriceBreakdown(BaseModel):
    """Line items of a booking.

    ``total = subtotal + deposit + fee − discount``, rounded once to the
    currency's minor unit. The other fields keep full precision.
    """

    subtotal: Decimal = Field(ge=0)
    """monthly_rate × months."""

    deposit: Decimal = Field(ge=0)
    fee: Decimal = Field(ge=0)

    discount: Decimal = Field(ge=0)
    """subtotal × plan discount rate."""

    discount_rate: Decimal = Field(ge=0, le=1)
    total: Decimal = Field(ge=0)


class BookingQuote(BaseModel):
    """Everything the booking summary shows for the current form state."""

    date_range: DateRange
    payment_plan: PaymentPlan
    duration: StayDuration
    breakdown: PriceBreakdown
    date_issue: DateIssue | None = None
    """Set when the dates must be corrected before the booking can go through."""

    @computed_field
    @property
    def can_submit(self) -> bool:
        return self.date_issue is None


# ═══════════════════════════════════════════════════════════════════════════
# Payloads for external collaborators
# ═══════════════════════════════════════════════════════════════════════════

class BookingSubmission(BaseModel):
    """Body of the booking-creation call."""

    property_id: str = Field(min_length=1)
    check_in: date
    check_out: date
    payment_plan: PaymentPlan
    total_amount: str
    """Quoted total as a plain decimal string, e.g. ``"695.00"``."""

    special_requests: str | None = None


class PaymentIntentRequest(BaseModel):
    """Amount handed to the payment processor for one booking."""

    booking_id: str = Field(min_length=1)
    amount: Decimal = Field(ge=0)
    amount_minor: int = Field(ge=0)
    """amount in the currency's minor unit (cents for USD)."""

    currency: str
