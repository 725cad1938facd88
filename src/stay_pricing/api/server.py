"""FastAPI server — booking quote service for the student-housing marketplace.

Run with:
    uvicorn stay_pricing.api.server:app --reload --port 8000

Or:
    stay-pricing-api

Endpoints:
    GET  /payment-plans     — plans with labels and discount rates
    GET  /config/defaults   — default pricing configuration
    POST /quote             — validate dates + price a stay
    POST /bookings/draft    — booking-creation payload for a valid quote
    POST /payments/intent   — amount to hand to the payment processor
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from stay_pricing.config.booking import PropertyRates, StayRequest
from stay_pricing.config.plans import PaymentPlan, plan_description, plan_label
from stay_pricing.config.pricing import PricingConfig
from stay_pricing.engine.quote import build_booking_submission, build_payment_intent, quote_stay
from stay_pricing.errors import DateRangeError, InvalidInputError
from stay_pricing.models.results import BookingQuote, BookingSubmission, PaymentIntentRequest
from stay_pricing.api.narrative import generate_quote_summary

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Student Housing Stay Pricing API",
    version="1.0",
    description=(
        "Date validation and price breakdowns for student-housing bookings. "
        "Quote a stay, then build the booking and payment-intent payloads "
        "from a quote whose dates validated."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class QuoteRequest(BaseModel):
    """Request body for /quote."""
    rates: PropertyRates
    stay: StayRequest
    today: date | None = Field(
        default=None,
        description="Reference day for the past-check-in rule. Defaults to the server's current date.",
    )
    config: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial PricingConfig overrides merged onto the defaults. "
                    "Example: {'platform_fee': 30, 'plan_discount_rates': {'semester': 0.02}}",
    )


class BookingDraftRequest(QuoteRequest):
    """Request body for /bookings/draft."""
    property_id: str = Field(min_length=1)


class PaymentIntentBody(QuoteRequest):
    """Request body for /payments/intent."""
    booking_id: str = Field(min_length=1)


class QuoteResponse(BaseModel):
    """Response from /quote."""
    quote: BookingQuote
    summary: str = ""


class PaymentPlanInfo(BaseModel):
    value: PaymentPlan
    label: str
    description: str
    discount_rate: str


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


def _build_config(overrides: dict[str, Any]) -> PricingConfig:
    """Build a PricingConfig from partial overrides merged onto defaults."""
    defaults = PricingConfig().model_dump(mode="json")
    _deep_merge(defaults, overrides)
    try:
        return PricingConfig(**defaults)
    except ValidationError as exc:
        raise InvalidInputError(f"invalid pricing config: {exc}") from exc


def _quote(req: QuoteRequest) -> tuple[BookingQuote, PricingConfig]:
    config = _build_config(req.config)
    today = req.today or date.today()
    return quote_stay(req.rates, req.stay, today, config), config


# ═══════════════════════════════════════════════════════════════════════════
# Error handlers
# ═══════════════════════════════════════════════════════════════════════════

@app.exception_handler(DateRangeError)
async def _date_range_error(request: Request, exc: DateRangeError) -> JSONResponse:
    logger.info("Rejected %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=422, content={"detail": exc.to_issue().model_dump()})


@app.exception_handler(InvalidInputError)
async def _invalid_input_error(request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — name, version and where to look next."""
    return {
        "name": "Student Housing Stay Pricing API",
        "version": "1.0",
        "start_here": "GET /payment-plans",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/payment-plans", response_model=list[PaymentPlanInfo])
def get_payment_plans():
    """Payment plans a student can choose, with their default discount."""
    config = PricingConfig()
    return [
        PaymentPlanInfo(
            value=plan,
            label=plan_label(plan, config.discount_rate(plan)),
            description=plan_description(plan, config.discount_rate(plan)),
            discount_rate=str(config.discount_rate(plan)),
        )
        for plan in PaymentPlan
    ]


@app.get("/config/defaults")
def get_config_defaults():
    """Default PricingConfig as JSON. Use as a starting point for overrides."""
    return PricingConfig().model_dump(mode="json")


@app.post("/quote", response_model=QuoteResponse)
def quote(req: QuoteRequest):
    """Validate the stay dates and price the booking.

    Always returns a breakdown. When the dates are invalid, ``date_issue``
    says why and ``can_submit`` is false.

    Example minimal request:
    ```json
    {"rates": {"monthly_rate": 200, "security_deposit": 100},
     "stay": {"check_in": "2025-01-10", "check_out": "2025-04-10", "payment_plan": "full"},
     "today": "2025-01-01"}
    ```
    """
    booking_quote, config = _quote(req)
    return QuoteResponse(
        quote=booking_quote,
        summary=generate_quote_summary(booking_quote, config),
    )


@app.post("/bookings/draft", response_model=BookingSubmission)
def booking_draft(req: BookingDraftRequest):
    """Booking-creation payload. 422 when the dates do not validate."""
    booking_quote, _ = _quote(req)
    return build_booking_submission(req.property_id, req.stay, booking_quote)


@app.post("/payments/intent", response_model=PaymentIntentRequest)
def payment_intent(req: PaymentIntentBody):
    """Charge amount for a booking. 422 when the dates do not validate."""
    booking_quote, config = _quote(req)
    return build_payment_intent(req.booking_id, booking_quote, config)


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(
        "stay_pricing.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
