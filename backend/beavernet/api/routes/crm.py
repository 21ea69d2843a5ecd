"""CRM Routes - customer records, search, and a customer's invoices."""

from fastapi import APIRouter, Depends, Query

from beavernet.api.dependencies import get_storage, require_service
from beavernet.api.routes.crud import add_crud_routes
from beavernet.schemas.base import to_response_list
from beavernet.schemas.crm import CustomerCreate, CustomerUpdate
from beavernet.storage.base import Storage

router = APIRouter(
    prefix="/api/customers", tags=["crm"],
    dependencies=[Depends(require_service("beavercrm"))],
)


@router.get("/search")
async def search_customers(
    q: str = Query(min_length=1), storage: Storage = Depends(get_storage),
):
    """Match names, nickname, email, phones, customer id and licence number."""
    return to_response_list(await storage.search_customers(q))


@router.get("/{customer_id}/invoices")
async def list_customer_invoices(customer_id: int, storage: Storage = Depends(get_storage)):
    return to_response_list(await storage.get_invoices_for_customer(customer_id))


add_crud_routes(router, "customers", CustomerCreate, CustomerUpdate)

routers = [router]
