"""
Stripe HTTP client helpers.

Used endpoints:
- POST /v1/payment_intents  -> {"id": "pi_...", "client_secret": "pi_..._secret_..."}
"""

from __future__ import annotations

from typing import Any

import httpx

DEFAULT_API_BASE = "https://api.stripe.com"


# Gateway failures are explicit and separable from other runtime errors.
class PaymentGatewayError(RuntimeError):
    pass


def _normalize_base_url(base_url: str) -> str:
    base_url = (base_url or "").strip()
    if not base_url:
        raise PaymentGatewayError("STRIPE_API_BASE is empty.")
    return base_url.rstrip("/")


async def create_payment_intent(
    *,
    secret_key: str,
    amount_minor: int,
    currency: str,
    metadata: dict[str, str] | None = None,
    base_url: str = DEFAULT_API_BASE,
    timeout_s: float = 30.0,
) -> dict[str, Any]:
    """
    Create a card PaymentIntent for `amount_minor` (cents for USD).
    """
    base_url = _normalize_base_url(base_url)
    secret_key = (secret_key or "").strip()
    if not secret_key:
        raise PaymentGatewayError("Stripe secret key is empty.")
    if amount_minor <= 0:
        raise PaymentGatewayError("Payment amount must be positive.")

    # Stripe takes form-encoded bodies with bracketed keys for arrays and maps.
    form: dict[str, Any] = {
        "amount": str(amount_minor),
        "currency": currency.lower(),
        "payment_method_types[]": "card",
    }
    for key, value in (metadata or {}).items():
        form[f"metadata[{key}]"] = value

    try:
        async with httpx.AsyncClient(base_url=base_url, timeout=timeout_s) as client:
            resp = await client.post(
                "/v1/payment_intents",
                data=form,
                headers={"Authorization": f"Bearer {secret_key}"},
            )
    except httpx.HTTPError as exc:
        raise PaymentGatewayError(f"Stripe request failed: {exc}") from exc

    if resp.status_code != 200:
        # Avoid dumping huge bodies; include a small snippet.
        body = resp.text[:500]
        raise PaymentGatewayError(f"Stripe payment intent request failed: {resp.status_code} {body}")

    data: dict[str, Any] = resp.json()
    if not data.get("client_secret"):
        raise PaymentGatewayError("Stripe returned no client secret.")
    return data
