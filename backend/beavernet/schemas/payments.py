"""Payment Schemas - invoices, payments, POS transactions, and PayPal orders.

Invariants:
    - Amounts accept numbers or numeric strings
    - Tax and discount amounts default to 0, and "" is read as 0
    - PayPal order amounts must be positive; currency and intent are required
"""

from decimal import Decimal
from typing import Annotated, Literal

from pydantic import Field

from beavernet.schemas.base import (
    BaseSchema, NonEmptyStr, OptionalDate, OptionalInt, ZeroDefaultFloat, partial_model,
)

InvoiceMethod = Literal["paypal", "googlepay", "cash", "check"]
PaymentStatusLiteral = Literal["pending", "completed", "failed", "refunded"]


class InvoiceCreate(BaseSchema):
    invoice_number: str | None = None
    customer_id: OptionalInt = None
    customer_name: NonEmptyStr
    customer_email: str | None = None
    customer_address: str | None = None
    amount: float
    currency: str = "USD"
    status: Literal["draft", "sent", "paid", "overdue", "cancelled"] = "draft"
    due_date: OptionalDate = None
    description: str | None = None
    items: str | None = None
    tax_amount: ZeroDefaultFloat = 0
    discount_amount: ZeroDefaultFloat = 0
    total_amount: float
    payment_method: InvoiceMethod | None = None
    paypal_order_id: str | None = None
    paid_at: OptionalDate = None


InvoiceUpdate = partial_model(InvoiceCreate, "InvoiceUpdate")


class PaymentCreate(BaseSchema):
    payment_id: str | None = None
    invoice_id: OptionalInt = None
    amount: float
    currency: str = "USD"
    payment_method: InvoiceMethod
    payment_status: PaymentStatusLiteral
    transaction_id: str | None = None
    paypal_order_id: str | None = None
    google_pay_token: str | None = None
    customer_name: str | None = None
    customer_email: str | None = None
    description: str | None = None
    receipt_url: str | None = None


PaymentUpdate = partial_model(PaymentCreate, "PaymentUpdate")


class PosTransactionCreate(BaseSchema):
    transaction_id: str | None = None
    type: Literal["sale", "refund", "void"]
    amount: float
    currency: str = "USD"
    payment_method: Literal["paypal", "googlepay", "cash", "card"]
    customer_name: str | None = None
    customer_email: str | None = None
    items: str | None = None
    tax_amount: ZeroDefaultFloat = 0
    discount_amount: ZeroDefaultFloat = 0
    total_amount: float
    payment_status: PaymentStatusLiteral = "pending"
    transaction_reference: str | None = None
    receipt_number: str | None = None
    employee_id: str | None = None


PosTransactionUpdate = partial_model(PosTransactionCreate, "PosTransactionUpdate")


class PayPalOrderRequest(BaseSchema):
    amount: Annotated[Decimal, Field(gt=0)]
    currency: NonEmptyStr
    intent: NonEmptyStr
