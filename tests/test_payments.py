import httpx
import pytest

from core import stripe
from payments import service as payment_service


@pytest.mark.parametrize(
    "amount, expected",
    [(10, 1000), (12.5, 1250), (12.345, 1235), (0.01, 1)],
)
def test_to_minor_units(amount, expected):
    assert payment_service.to_minor_units(amount) == expected


def test_payments_need_secret_key(client, login, monkeypatch):
    monkeypatch.delenv("STRIPE_SECRET_KEY", raising=False)
    login("student@example.com")
    resp = client.post("/api/payments/create-payment-intent", json={"amount": 25})
    assert resp.status_code == 503


def test_non_positive_amount_is_rejected(client, login, monkeypatch):
    monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_123")
    login("student@example.com")
    resp = client.post("/api/payments/create-payment-intent", json={"amount": 0})
    assert resp.status_code == 422


def _mock_stripe(monkeypatch, handler):
    real_client = httpx.AsyncClient

    def factory(**kwargs):
        return real_client(transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(stripe.httpx, "AsyncClient", factory)


def test_create_payment_intent(client, login, monkeypatch):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = request.content.decode()
        seen["path"] = request.url.path
        return httpx.Response(200, json={"id": "pi_1", "client_secret": "pi_1_secret_x"})

    _mock_stripe(monkeypatch, handler)
    monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_123")
    login("student@example.com")

    resp = client.post("/api/payments/create-payment-intent", json={"amount": 12.5})
    assert resp.status_code == 200
    assert resp.json() == {"clientSecret": "pi_1_secret_x", "paymentIntentId": "pi_1"}
    assert seen["path"] == "/v1/payment_intents"
    assert seen["auth"] == "Bearer sk_test_123"
    assert "amount=1250" in seen["body"]
    assert "currency=usd" in seen["body"]


def test_gateway_error_is_502(client, login, monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(402, json={"error": {"message": "card declined"}})

    _mock_stripe(monkeypatch, handler)
    monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_123")
    login("student@example.com")

    resp = client.post("/api/payments/create-payment-intent", json={"amount": 5})
    assert resp.status_code == 502
    assert "402" in resp.json()["detail"]
