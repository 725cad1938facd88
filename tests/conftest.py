"""Shared test fixtures — a sample listing and the reference dates used throughout."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from stay_pricing.config import PaymentPlan, PricingConfig, PropertyRates, StayRequest


@pytest.fixture
def today() -> date:
    return date(2025, 1, 1)


@pytest.fixture
def rates() -> PropertyRates:
    return PropertyRates(monthly_rate=Decimal("200"), security_deposit=Decimal("100"))


@pytest.fixture
def config() -> PricingConfig:
    return PricingConfig(platform_fee=Decimal("25"))


@pytest.fixture
def spring_stay() -> StayRequest:
    """Three calendar months, full upfront payment."""
    return StayRequest(
        check_in=date(2025, 1, 10),
        check_out=date(2025, 4, 10),
        payment_plan=PaymentPlan.FULL,
    )


@pytest.fixture
def monthly_stay(spring_stay: StayRequest) -> StayRequest:
    return spring_stay.model_copy(update={"payment_plan": PaymentPlan.MONTHLY})
