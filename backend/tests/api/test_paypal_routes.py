"""PayPal Routes - verifies the pass-through relay against a mocked PayPal.

Invariants:
    - Unconfigured PayPal answers 503 {"error": "PayPal is not configured"},
      even when the body is invalid
    - Order and capture answers relay PayPal's status and body verbatim,
      an empty body included
    - Transport failures answer 500 with the generic message

Design Decisions:
    - httpx.MockTransport injected into PayPalClient: no patching, no network
"""

import json

import httpx
import pytest

from beavernet.infrastructure.paypal_client import PayPalClient

ORDER = {"amount": "25.00", "currency": "USD", "intent": "CAPTURE"}


def _paypal_handler(calls: list):
    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if request.url.path == "/v1/oauth2/token":
            return httpx.Response(200, json={"access_token": "A21-token"})
        if request.url.path == "/v2/checkout/orders":
            return httpx.Response(201, json={"id": "ORDER-1", "status": "CREATED"})
        if request.url.path.endswith("/capture"):
            return httpx.Response(422, json={"name": "UNPROCESSABLE_ENTITY"})
        return httpx.Response(404, json={})
    return handler


@pytest.fixture
def paypal_calls(app):
    calls: list[httpx.Request] = []
    app.state.paypal = PayPalClient(
        "client-id", "client-secret",
        transport=httpx.MockTransport(_paypal_handler(calls)),
    )
    return calls


async def test_unconfigured_returns_503(client, as_user):
    res = await client.get("/api/paypal/setup", auth=as_user("User"))
    assert res.status_code == 503
    assert res.json() == {"error": "PayPal is not configured"}


async def test_unconfigured_wins_over_invalid_body(client, as_user):
    res = await client.post("/api/paypal/order", json={}, auth=as_user("User"))
    assert res.status_code == 503


async def test_paypal_requires_payment_level(client, as_user, paypal_calls):
    res = await client.get("/api/paypal/setup", auth=as_user("911 Dispatcher"))
    assert res.status_code == 403
    assert paypal_calls == []


async def test_setup_returns_client_token(client, as_user, paypal_calls):
    res = await client.get("/api/paypal/setup", auth=as_user("Admin"))
    assert res.status_code == 200
    assert res.json() == {"clientToken": "A21-token"}
    form = paypal_calls[0].content.decode()
    assert "response_type=client_token" in form
    assert "intent=sdk_init" in form


async def test_create_order_relays_paypal_answer(client, as_user, paypal_calls):
    res = await client.post("/api/paypal/order", json=ORDER, auth=as_user("User"))
    assert res.status_code == 201
    assert res.json() == {"id": "ORDER-1", "status": "CREATED"}

    order_call = paypal_calls[-1]
    assert order_call.headers["authorization"] == "Bearer A21-token"
    assert order_call.headers["prefer"] == "return=minimal"
    body = json.loads(order_call.content)
    assert body == {
        "intent": "CAPTURE",
        "purchase_units": [{"amount": {"currency_code": "USD", "value": "25.00"}}],
    }


async def test_create_order_validates_amount(client, as_user, paypal_calls):
    res = await client.post(
        "/api/paypal/order", json={**ORDER, "amount": "-1"}, auth=as_user("User"),
    )
    assert res.status_code == 400
    assert paypal_calls == []


async def test_capture_relays_error_status(client, as_user, paypal_calls):
    res = await client.post("/api/paypal/order/ORDER-1/capture", auth=as_user("User"))
    assert res.status_code == 422
    assert res.json() == {"name": "UNPROCESSABLE_ENTITY"}
    assert paypal_calls[-1].url.path == "/v2/checkout/orders/ORDER-1/capture"


async def test_transport_failure_is_500(client, app, as_user):
    def broken(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    app.state.paypal = PayPalClient(
        "client-id", "client-secret", transport=httpx.MockTransport(broken),
    )
    res = await client.post("/api/paypal/order", json=ORDER, auth=as_user("User"))
    assert res.status_code == 500
    assert res.json() == {"error": "Failed to create order."}

    res = await client.get("/api/paypal/setup", auth=as_user("User"))
    assert res.status_code == 500
    assert res.json() == {"error": "Failed to load PayPal configuration"}


async def test_empty_paypal_body_is_relayed(client, app, as_user):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v1/oauth2/token":
            return httpx.Response(200, json={"access_token": "A21-token"})
        if request.url.path.endswith("/capture"):
            return httpx.Response(204)
        return httpx.Response(202)

    app.state.paypal = PayPalClient(
        "client-id", "client-secret", transport=httpx.MockTransport(handler),
    )
    res = await client.post("/api/paypal/order", json=ORDER, auth=as_user("User"))
    assert res.status_code == 202
    assert res.json() == {}

    res = await client.post("/api/paypal/order/ORDER-1/capture", auth=as_user("User"))
    assert res.status_code == 204
    assert res.content == b""
