"""PayPal Client - thin httpx wrapper over the PayPal REST v2 Orders API.

Invariants:
    - Order creation and capture return PayPal's (status_code, json body)
      untouched; the route relays both verbatim. An empty body reads as {}
    - Transport failures and unreadable bodies map to PaymentGatewayError
      (core/errors.py); HTTP error statuses from PayPal are NOT errors here
    - Every call fetches a fresh OAuth token (no token cache)

Design Decisions:
    - httpx.AsyncClient with an injectable transport: tests swap in
      httpx.MockTransport instead of patching
    - No retries: a failed payment call surfaces immediately
"""

import logging
from decimal import Decimal

import httpx

from beavernet.core.errors import PaymentGatewayError

logger = logging.getLogger(__name__)

PAYPAL_BASE_URLS = {
    "sandbox": "https://api-m.sandbox.paypal.com",
    "production": "https://api-m.paypal.com",
}


class PayPalClient:
    """Client-credentials PayPal client for SDK setup, orders, and captures."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        environment: str = "sandbox",
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.base_url = PAYPAL_BASE_URLS[environment]
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout_seconds,
            transport=transport,
        )

    async def close(self) -> None:
        await self.client.aclose()

    async def get_client_token(self) -> str:
        """Browser SDK init token (intent=sdk_init, response_type=client_token)."""
        payload = await self._request_token({
            "grant_type": "client_credentials",
            "response_type": "client_token",
            "intent": "sdk_init",
        }, "client_token")
        return payload["access_token"]

    async def create_order(
        self, amount: Decimal, currency: str, intent: str,
    ) -> tuple[int, dict]:
        body = {
            "intent": intent,
            "purchase_units": [
                {"amount": {"currency_code": currency, "value": str(amount)}},
            ],
        }
        return await self._order_call("/v2/checkout/orders", body, "create_order")

    async def capture_order(self, order_id: str) -> tuple[int, dict]:
        return await self._order_call(
            f"/v2/checkout/orders/{order_id}/capture", None, "capture_order",
        )

    async def _access_token(self) -> str:
        payload = await self._request_token(
            {"grant_type": "client_credentials"}, "access_token",
        )
        return payload["access_token"]

    async def _request_token(self, form: dict, operation: str) -> dict:
        try:
            response = await self.client.post(
                "/v1/oauth2/token",
                data=form,
                auth=(self.client_id, self.client_secret),
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            logger.error(f"PayPal {operation} request failed: {e}")
            raise PaymentGatewayError("Failed to load PayPal configuration", operation)
        except ValueError as e:
            logger.error(f"PayPal {operation} returned unreadable body: {e}")
            raise PaymentGatewayError("Failed to load PayPal configuration", operation)
        if "access_token" not in payload:
            raise PaymentGatewayError("Failed to load PayPal configuration", operation)
        return payload

    async def _order_call(
        self, path: str, body: dict | None, operation: str,
    ) -> tuple[int, dict]:
        failure = "Failed to create order." if operation == "create_order" else "Failed to capture order."
        try:
            token = await self._access_token()
            response = await self.client.post(
                path,
                json=body,
                headers={
                    "Authorization": f"Bearer {token}",
                    "Prefer": "return=minimal",
                },
            )
            payload = response.json() if response.content else {}
        except PaymentGatewayError as e:
            raise PaymentGatewayError(failure, operation) from e
        except httpx.HTTPError as e:
            logger.error(f"PayPal {operation} failed: {e}")
            raise PaymentGatewayError(failure, operation)
        except ValueError as e:
            logger.error(f"PayPal {operation} returned unreadable body: {e}")
            raise PaymentGatewayError(failure, operation)
        logger.info(
            f"PayPal {operation} answered {response.status_code}",
            extra={"status_code": response.status_code},
        )
        return response.status_code, payload
