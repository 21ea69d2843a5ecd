"""Payment Routes - BeaverPay invoices, payments, and POS transactions."""

from fastapi import APIRouter, Depends

from beavernet.api.dependencies import get_storage, require_service
from beavernet.api.routes.crud import add_crud_routes
from beavernet.schemas.base import to_response_list
from beavernet.schemas.payments import (
    InvoiceCreate, InvoiceUpdate, PaymentCreate, PaymentUpdate,
    PosTransactionCreate, PosTransactionUpdate,
)
from beavernet.storage.base import Storage

_guard = [Depends(require_service("beaverpay"))]

invoices_router = APIRouter(prefix="/api/invoices", tags=["payments"], dependencies=_guard)
payments_router = APIRouter(prefix="/api/payments", tags=["payments"], dependencies=_guard)
pos_router = APIRouter(prefix="/api/pos-transactions", tags=["payments"], dependencies=_guard)


@invoices_router.get("/{invoice_id}/payments")
async def list_invoice_payments(invoice_id: int, storage: Storage = Depends(get_storage)):
    return to_response_list(await storage.get_payments_for_invoice(invoice_id))


add_crud_routes(invoices_router, "invoices", InvoiceCreate, InvoiceUpdate)
add_crud_routes(payments_router, "payments", PaymentCreate, PaymentUpdate)
add_crud_routes(pos_router, "pos_transactions", PosTransactionCreate, PosTransactionUpdate)

routers = [invoices_router, payments_router, pos_router]
