"""Tests for engine/pricing.py."""

from __future__ import annotations

from decimal import Decimal

import pytest

from stay_pricing.config import PaymentPlan, PricingConfig, PricingInput
from stay_pricing.config.booking import MAX_AMOUNT
from stay_pricing.engine.pricing import compute_price_breakdown, price_stay, round_money
from stay_pricing.errors import InvalidInputError
from stay_pricing.models.results import StayDuration


# ═══════════════════════════════════════════════════════════════════════════
# Reference bookings
# ═══════════════════════════════════════════════════════════════════════════

class TestReferenceBookings:

    def test_full_payment_three_months(self):
        b = compute_price_breakdown(200, 100, 25, "full", 3)
        assert b.subtotal == Decimal("600")
        assert b.discount == Decimal("30")
        assert b.deposit == Decimal("100")
        assert b.fee == Decimal("25")
        assert b.total == Decimal("695")
        assert str(b.total) == "695.00"

    def test_monthly_payment_three_months(self):
        b = compute_price_breakdown(200, 100, 25, PaymentPlan.MONTHLY, 3)
        assert b.discount == 0
        assert b.total == Decimal("725")

    @pytest.mark.parametrize("plan", ["monthly", "semester", "student_loan"])
    def test_only_full_plan_discounts(self, plan):
        b = compute_price_breakdown(Decimal("450"), Decimal("300"), Decimal("25"), plan, 4)
        assert b.discount == 0
        assert b.discount_rate == 0
        assert b.total == b.subtotal + b.deposit + b.fee

    def test_full_discount_is_exactly_five_percent(self):
        b = compute_price_breakdown(Decimal("333.33"), 0, 0, "full", 7)
        assert b.subtotal == Decimal("2333.31")
        assert b.discount == b.subtotal * Decimal("0.05")
        assert b.discount == Decimal("116.6655")

    def test_accepts_stay_duration(self):
        b = compute_price_breakdown(200, 100, 25, "full", StayDuration(months=3, days=90))
        assert b.total == Decimal("695")


# ═══════════════════════════════════════════════════════════════════════════
# Rounding
# ═══════════════════════════════════════════════════════════════════════════

class TestRounding:

    def test_only_total_is_rounded(self):
        b = compute_price_breakdown(Decimal("333.33"), 0, 0, "full", 7)
        # 2333.31 − 116.6655 = 2216.6445
        assert b.total == Decimal("2216.64")
        assert b.discount == Decimal("116.6655")

    def test_half_even(self):
        assert round_money(Decimal("10.125"), 2) == Decimal("10.12")
        assert round_money(Decimal("10.135"), 2) == Decimal("10.14")

    def test_zero_decimal_currency(self):
        cfg = PricingConfig(minor_unit_places=0)
        b = compute_price_breakdown(Decimal("1010"), 0, 0, "full", 1, cfg)
        # 1010 − 50.5 = 959.5 → 960 (half-even)
        assert b.total == Decimal("960")


# ═══════════════════════════════════════════════════════════════════════════
# Configurable discounts
# ═══════════════════════════════════════════════════════════════════════════

class TestDiscountTable:

    def test_custom_rate_for_semester(self):
        rates = PricingConfig().plan_discount_rates | {PaymentPlan.SEMESTER: Decimal("0.02")}
        cfg = PricingConfig(plan_discount_rates=rates)
        b = compute_price_breakdown(500, 0, 25, "semester", 6, cfg)
        assert b.discount == Decimal("60")
        assert b.total == Decimal("2965")

    def test_fee_is_caller_supplied(self):
        a = compute_price_breakdown(200, 100, 0, "monthly", 3)
        b = compute_price_breakdown(200, 100, 40, "monthly", 3)
        assert b.total - a.total == Decimal("40")


# ═══════════════════════════════════════════════════════════════════════════
# Invariants
# ═══════════════════════════════════════════════════════════════════════════

class TestInvariants:

    @pytest.mark.parametrize("plan", list(PaymentPlan))
    @pytest.mark.parametrize("rate,deposit,fee,months", [
        (0, 0, 0, 1), (200, 100, 25, 3), (1250.5, 0, 25, 12), (99.99, 500, 10, 1),
    ])
    def test_total_identity_and_non_negative(self, plan, rate, deposit, fee, months):
        b = compute_price_breakdown(rate, deposit, fee, plan, months)
        assert b.total == round_money(b.subtotal + b.deposit + b.fee - b.discount, 2)
        for field in ["subtotal", "deposit", "fee", "discount", "total"]:
            assert getattr(b, field) >= 0, f"{field} should be non-negative"
        assert b.discount <= b.subtotal * Decimal("0.05")

    def test_idempotent(self):
        first = compute_price_breakdown(200, 100, 25, "full", 3)
        second = compute_price_breakdown(200, 100, 25, "full", 3)
        assert first == second

    def test_price_stay_matches_raw_call(self):
        pricing = PricingInput(
            monthly_rate=Decimal("200"), security_deposit=Decimal("100"),
            platform_fee=Decimal("25"), payment_plan=PaymentPlan.FULL,
        )
        assert price_stay(pricing, StayDuration(months=3)) == compute_price_breakdown(200, 100, 25, "full", 3)


# ═══════════════════════════════════════════════════════════════════════════
# Caller contract violations
# ═══════════════════════════════════════════════════════════════════════════

class TestInvalidInput:

    @pytest.mark.parametrize("kwargs", [
        {"monthly_rate": -1},
        {"security_deposit": Decimal("-0.01")},
        {"platform_fee": -25},
        {"monthly_rate": float("nan")},
        {"monthly_rate": float("inf")},
        {"security_deposit": Decimal("Infinity")},
        {"monthly_rate": "two hundred"},
        {"payment_plan": "weekly"},
    ])
    def test_bad_amounts_rejected(self, kwargs):
        args = {
            "monthly_rate": 200, "security_deposit": 100, "platform_fee": 25,
            "payment_plan": "full", "months": 3,
        } | kwargs
        with pytest.raises(InvalidInputError):
            compute_price_breakdown(**args)

    @pytest.mark.parametrize("months", [0, -2, 1.5, "3", True])
    def test_bad_months_rejected(self, months):
        with pytest.raises(InvalidInputError):
            compute_price_breakdown(200, 100, 25, "full", months)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            compute_price_breakdown(-200, 100, 25, "full", 3)

    def test_amount_above_cap_rejected(self):
        with pytest.raises(InvalidInputError):
            compute_price_breakdown(Decimal("1e27"), 0, 0, "full", 1)

    def test_total_too_large_to_round_rejected(self):
        """Huge month counts overflow the decimal precision of the total."""
        with pytest.raises(InvalidInputError):
            compute_price_breakdown(MAX_AMOUNT, 0, 0, "monthly", 10**20)

    def test_largest_accepted_amount_prices(self):
        b = compute_price_breakdown(MAX_AMOUNT, MAX_AMOUNT, MAX_AMOUNT, "full", 12)
        assert b.total == Decimal("1.34e13")
