"""Booking inputs — listing prices and the student's stay selection."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field

from stay_pricing.config.plans import PaymentPlan

MAX_AMOUNT = Decimal("1e12")
"""Largest amount accepted anywhere in a booking (major units)."""

Money = Annotated[Decimal, Field(ge=0, le=MAX_AMOUNT, allow_inf_nan=False)]
"""Non-negative, finite amount in major currency units."""


class PropertyRates(BaseModel):
    """Prices published on a listing."""

    monthly_rate: Money = Field(description="Rent per month")
    security_deposit: Money = Field(default=Decimal("0"), description="Refundable deposit, charged once")


class StayRequest(BaseModel):
    """What the student enters on the booking form."""

    check_in: date
    check_out: date
    payment_plan: PaymentPlan = Field(default=PaymentPlan.FULL)
    special_requests: str | None = Field(
        default=None, max_length=500,
        description="Free-text note for the owner (max 500 characters).",
    )


class PricingInput(BaseModel):
    """Everything the price calculator needs apart from the stay length."""

    monthly_rate: Money
    security_deposit: Money
    platform_fee: Money
    payment_plan: PaymentPlan
