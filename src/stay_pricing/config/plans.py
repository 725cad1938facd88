"""Payment plans offered at booking time."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum


class PaymentPlan(str, Enum):
    """Billing strategy a student picks on the booking form."""

    FULL = "full"
    MONTHLY = "monthly"
    SEMESTER = "semester"
    STUDENT_LOAN = "student_loan"

    @property
    def label(self) -> str:
        return PAYMENT_PLAN_LABELS[self]


PAYMENT_PLAN_LABELS: dict[PaymentPlan, str] = {
    PaymentPlan.FULL: "Full Payment",
    PaymentPlan.MONTHLY: "Monthly Payments",
    PaymentPlan.SEMESTER: "Semester Payments",
    PaymentPlan.STUDENT_LOAN: "Student Loan Assistance",
}

PAYMENT_PLAN_DESCRIPTIONS: dict[PaymentPlan, str] = {
    PaymentPlan.FULL: "Pay everything upfront",
    PaymentPlan.MONTHLY: "Pay monthly rent + fees",
    PaymentPlan.SEMESTER: "Pay per semester",
    PaymentPlan.STUDENT_LOAN: "We'll work with your financial aid",
}


def format_rate(rate: Decimal) -> str:
    """``Decimal("0.05")`` → ``"5%"``."""
    pct = (rate * 100).normalize()
    return f"{pct:f}%"


def plan_label(plan: PaymentPlan | str, discount_rate: Decimal = Decimal("0")) -> str:
    """Label shown on the plan picker, with the discount when there is one."""
    base = PAYMENT_PLAN_LABELS[PaymentPlan(plan)]
    if discount_rate > 0:
        return f"{base} ({format_rate(discount_rate)} discount)"
    return base


def plan_description(plan: PaymentPlan | str, discount_rate: Decimal = Decimal("0")) -> str:
    base = PAYMENT_PLAN_DESCRIPTIONS[PaymentPlan(plan)]
    if discount_rate > 0:
        return f"{base} and save {format_rate(discount_rate)}"
    return base
