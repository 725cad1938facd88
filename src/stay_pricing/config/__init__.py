"""Configuration and input models."""

from stay_pricing.config.plans import (
    PaymentPlan,
    PAYMENT_PLAN_LABELS,
    PAYMENT_PLAN_DESCRIPTIONS,
    format_rate,
    plan_label,
    plan_description,
)
from stay_pricing.config.pricing import PricingConfig
from stay_pricing.config.booking import Money, PropertyRates, StayRequest, PricingInput

__all__ = [
    "PaymentPlan",
    "PAYMENT_PLAN_LABELS",
    "PAYMENT_PLAN_DESCRIPTIONS",
    "format_rate",
    "plan_label",
    "plan_description",
    "PricingConfig",
    "Money",
    "PropertyRates",
    "StayRequest",
    "PricingInput",
]
