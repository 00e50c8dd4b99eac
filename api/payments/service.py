"""
Payment business logic: turn an application fee into a Stripe PaymentIntent
the frontend can confirm.
"""

from __future__ import annotations

import logging
import os
from decimal import ROUND_HALF_UP, Decimal

from fastapi import HTTPException, status

from core import config, stripe

DEFAULT_CURRENCY = "usd"

logger = logging.getLogger(__name__)


def stripe_secret_key() -> str:
    return os.environ.get("STRIPE_SECRET_KEY", "").strip()


def stripe_api_base() -> str:
    return config.env_str("STRIPE_API_BASE", stripe.DEFAULT_API_BASE)


def payment_currency() -> str:
    return config.env_str("PAYMENT_CURRENCY", DEFAULT_CURRENCY).lower()


def to_minor_units(amount: float) -> int:
    # 12.345 -> 1235; floats are rounded half-up at the cent.
    cents = (Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(cents)


async def create_payment_intent(amount: float, *, current_user: dict, application_id: str | None = None) -> dict:
    secret_key = stripe_secret_key()
    if not secret_key:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Payments are not configured.",
        )

    amount_minor = to_minor_units(amount)
    if amount_minor <= 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Amount must be positive.")

    metadata = {"userEmail": current_user["email"]}
    if application_id:
        metadata["applicationId"] = application_id

    try:
        intent = await stripe.create_payment_intent(
            secret_key=secret_key,
            amount_minor=amount_minor,
            currency=payment_currency(),
            metadata=metadata,
            base_url=stripe_api_base(),
        )
    except stripe.PaymentGatewayError as exc:
        logger.exception("payment_intent_failed email=%s amount_minor=%s", current_user["email"], amount_minor)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc

    logger.info("payment_intent_created id=%s amount_minor=%s", intent.get("id"), amount_minor)
    return {"clientSecret": intent["client_secret"], "paymentIntentId": intent.get("id")}
