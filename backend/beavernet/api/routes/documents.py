"""Document Routes - BeaverDoc notarized documents."""

from fastapi import APIRouter, Depends

from beavernet.api.dependencies import require_service
from beavernet.api.routes.crud import add_crud_routes
from beavernet.schemas.documents import DocumentCreate, DocumentUpdate

router = APIRouter(
    prefix="/api/documents", tags=["documents"],
    dependencies=[Depends(require_service("beaverdoc"))],
)

add_crud_routes(router, "documents", DocumentCreate, DocumentUpdate)

routers = [router]
