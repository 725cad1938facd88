"""Booking summary text — the plain-text version of the summary card.

Turns a ``BookingQuote`` into the lines the student sees next to the
booking form: duration, rent × months, deposit, platform fee, the plan
discount when there is one, and the total.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from stay_pricing.config.plans import PaymentPlan, format_rate, plan_label
from stay_pricing.config.pricing import PricingConfig
from stay_pricing.models.results import BookingQuote


def format_price(amount: Decimal | int | float, symbol: str = "$") -> str:
    """Whole currency units, e.g. ``$695``."""
    whole = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{symbol}{whole}"


def format_price_detailed(amount: Decimal | int | float, symbol: str = "$", places: int = 2) -> str:
    """Thousands separators, minor units only when present.

    ``$1,234``, ``$1,234.5``, ``$1,234.56``: trailing zeros are dropped.
    """
    rounded = Decimal(str(amount)).quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)
    text = f"{rounded:,.{places}f}"
    if places > 0:
        text = text.rstrip("0").rstrip(".")
    return f"{symbol}{text}"


def payment_plan_label(plan: PaymentPlan | str, config: PricingConfig | None = None) -> str:
    """Plan label carrying the discount configured for it."""
    cfg = config or PricingConfig()
    plan = PaymentPlan(plan)
    return plan_label(plan, cfg.discount_rate(plan))


def duration_label(months: int) -> str:
    return f"{months} month" if months == 1 else f"{months} months"


def _plan_name(plan: PaymentPlan) -> str:
    return plan.value.replace("_", " ").capitalize()


def generate_quote_summary(quote: BookingQuote, config: PricingConfig | None = None) -> str:
    """Render a quote as the booking summary block."""
    cfg = config or PricingConfig()
    sym = cfg.currency_symbol
    b = quote.breakdown
    months = quote.duration.months

    rows: list[tuple[str, str]] = [
        (f"Monthly rent × {months}", format_price(b.subtotal, sym)),
        ("Security deposit", format_price(b.deposit, sym)),
        ("Platform fee", format_price(b.fee, sym)),
    ]
    if b.discount > 0:
        rows.append(
            (f"{_plan_name(quote.payment_plan)} payment discount ({format_rate(b.discount_rate)})",
             f"-{format_price(b.discount, sym)}"),
        )

    width = max(len(label) for label, _ in rows + [("Total", "")])
    lines = [
        "BOOKING SUMMARY",
        "=" * 40,
        f"Dates: {quote.date_range.check_in.isoformat()} → {quote.date_range.check_out.isoformat()}",
        f"Duration: {duration_label(months)}",
        f"Payment plan: {plan_label(quote.payment_plan, b.discount_rate)}",
        "",
    ]
    lines.extend(f"{label:<{width}}  {value:>10}" for label, value in rows)
    lines.append("-" * 40)
    lines.append(f"{'Total':<{width}}  {format_price(b.total, sym):>10}")

    if quote.date_issue is not None:
        lines.append("")
        lines.append(f"Cannot book yet: {quote.date_issue.message}")

    return "\n".join(lines)
