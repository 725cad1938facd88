"""Pricing configuration — platform fee, plan discounts, currency."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from stay_pricing.config.booking import MAX_AMOUNT
from stay_pricing.config.plans import PaymentPlan


def _default_discount_rates() -> dict[PaymentPlan, Decimal]:
    return {
        PaymentPlan.FULL: Decimal("0.05"),
        PaymentPlan.MONTHLY: Decimal("0"),
        PaymentPlan.SEMESTER: Decimal("0"),
        PaymentPlan.STUDENT_LOAN: Decimal("0"),
    }


class PricingConfig(BaseModel):
    """Marketplace-wide pricing knobs.

    The calculator never hardcodes the fee or the discounts: callers pass
    this model (or its defaults) so either can change without touching the
    arithmetic.
    """

    platform_fee: Decimal = Field(
        default=Decimal("25"), ge=0, le=MAX_AMOUNT, allow_inf_nan=False,
        description="Flat platform fee added once per booking, in major currency units.",
    )
    plan_discount_rates: dict[PaymentPlan, Decimal] = Field(
        default_factory=_default_discount_rates,
        description="Fraction of the rent subtotal taken off per payment plan (0–1). "
                    "Every plan must be listed; 0 = no discount.",
    )
    currency: str = Field(
        default="USD", min_length=3, max_length=3,
        description="ISO 4217 code handed to the payment processor.",
    )
    currency_symbol: str = Field(default="$", description="Symbol used in booking summaries.")
    minor_unit_places: int = Field(
        default=2, ge=0, le=4,
        description="Decimal places of the currency's minor unit. "
                    "The booking total is rounded (half-even) to this precision.",
    )

    @field_validator("plan_discount_rates")
    @classmethod
    def _check_discount_rates(cls, rates: dict[PaymentPlan, Decimal]) -> dict[PaymentPlan, Decimal]:
        missing = [plan.value for plan in PaymentPlan if plan not in rates]
        if missing:
            raise ValueError(f"missing discount rate for plan(s): {', '.join(missing)}")
        for plan, rate in rates.items():
            if not rate.is_finite() or rate < 0 or rate > 1:
                raise ValueError(f"discount rate for '{plan.value}' must be between 0 and 1, got {rate}")
        return rates

    def discount_rate(self, plan: PaymentPlan) -> Decimal:
        return self.plan_discount_rates[plan]
