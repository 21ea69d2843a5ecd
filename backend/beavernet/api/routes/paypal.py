"""PayPal Routes - SDK setup token, order creation, and capture pass-through.

Invariants:
    - Unconfigured PayPal answers 503 {"error": "PayPal is not configured"}
      before the body is validated
    - Order and capture answers relay PayPal's status code and JSON body
      verbatim; an empty body is relayed as {} (or no body on 204)
    - Transport failures answer 500 with a generic message (PaymentGatewayError)
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from beavernet.api.dependencies import require_service
from beavernet.core.errors import PaymentNotConfiguredError
from beavernet.infrastructure.paypal_client import PayPalClient
from beavernet.schemas.payments import PayPalOrderRequest

router = APIRouter(
    prefix="/api/paypal", tags=["paypal"],
    dependencies=[Depends(require_service("beaverpay"))],
)


def get_paypal_client(request: Request) -> PayPalClient:
    client = getattr(request.app.state, "paypal", None)
    if client is None:
        raise PaymentNotConfiguredError()
    return client


def relay(status_code: int, payload: dict) -> Response:
    """PayPal's status and body as they came; a 204 goes out with no body."""
    if status_code == status.HTTP_204_NO_CONTENT:
        return Response(status_code=status_code)
    return JSONResponse(status_code=status_code, content=payload)


@router.get("/setup")
async def paypal_setup(paypal: PayPalClient = Depends(get_paypal_client)):
    return {"clientToken": await paypal.get_client_token()}


@router.post("/order")
async def create_order(
    body: PayPalOrderRequest, paypal: PayPalClient = Depends(get_paypal_client),
):
    status_code, payload = await paypal.create_order(body.amount, body.currency, body.intent)
    return relay(status_code, payload)


@router.post("/order/{order_id}/capture")
async def capture_order(order_id: str, paypal: PayPalClient = Depends(get_paypal_client)):
    status_code, payload = await paypal.capture_order(order_id)
    return relay(status_code, payload)


routers = [router]
