"""Booking price breakdown.

    subtotal = monthly_rate × months
    discount = subtotal × discount_rate[payment_plan]
    total    = subtotal + deposit + platform_fee − discount

All arithmetic is ``Decimal``. Only the total is rounded (half-even, to the
currency's minor unit); subtotal and discount keep full precision so the
line items never drift from what was multiplied.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Any

from pydantic import ValidationError

from stay_pricing.config.booking import PricingInput
from stay_pricing.config.plans import PaymentPlan
from stay_pricing.config.pricing import PricingConfig
from stay_pricing.errors import InvalidInputError
from stay_pricing.models.results import PriceBreakdown, StayDuration

logger = logging.getLogger(__name__)


def round_money(amount: Decimal, places: int) -> Decimal:
    """Round half-even to ``places`` decimals.

    Amounts too large to carry ``places`` decimals within the decimal
    context's precision raise :class:`InvalidInputError`.
    """
    try:
        return amount.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_EVEN)
    except InvalidOperation as exc:
        logger.warning("Rejected amount too large to round: %s", amount)
        raise InvalidInputError(f"amount {amount} is too large to price") from exc


def _billable_months(months: Any) -> int:
    if isinstance(months, StayDuration):
        return months.months
    if isinstance(months, bool) or not isinstance(months, int):
        raise InvalidInputError(f"months must be an integer, got {type(months).__name__}")
    if months < 1:
        raise InvalidInputError(f"months must be at least 1, got {months}")
    return months


def price_stay(
    pricing: PricingInput,
    duration: StayDuration | int,
    config: PricingConfig | None = None,
) -> PriceBreakdown:
    """Price an already-validated :class:`PricingInput`."""
    cfg = config or PricingConfig()
    months = _billable_months(duration)

    rate = cfg.discount_rate(pricing.payment_plan)
    subtotal = pricing.monthly_rate * months
    discount = subtotal * rate
    total = subtotal + pricing.security_deposit + pricing.platform_fee - discount

    return PriceBreakdown(
        subtotal=subtotal,
        deposit=pricing.security_deposit,
        fee=pricing.platform_fee,
        discount=discount,
        discount_rate=rate,
        total=round_money(total, cfg.minor_unit_places),
    )


def compute_price_breakdown(
    monthly_rate: Decimal | int | float | str,
    security_deposit: Decimal | int | float | str,
    platform_fee: Decimal | int | float | str,
    payment_plan: PaymentPlan | str,
    months: StayDuration | int,
    config: PricingConfig | None = None,
) -> PriceBreakdown:
    """Price a stay from raw amounts.

    Amounts are checked before any arithmetic: negative, NaN/infinite or
    non-numeric values, an unknown plan, or ``months < 1`` raise
    :class:`InvalidInputError`. Nothing is coerced to zero.

    ``platform_fee`` is passed explicitly; ``config`` only supplies the
    per-plan discount table and the rounding precision.
    """
    try:
        pricing = PricingInput(
            monthly_rate=monthly_rate,
            security_deposit=security_deposit,
            platform_fee=platform_fee,
            payment_plan=payment_plan,
        )
    except ValidationError as exc:
        logger.warning("Rejected pricing input: %s", exc.errors(include_url=False))
        raise InvalidInputError(f"invalid pricing input: {exc}") from exc

    return price_stay(pricing, months, config)
