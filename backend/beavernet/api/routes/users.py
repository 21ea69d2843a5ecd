"""User Administration Routes - staff accounts, secrets never echoed."""

from fastapi import APIRouter, Depends

from beavernet.api.dependencies import require_service
from beavernet.api.routes.crud import add_crud_routes
from beavernet.schemas.users import USER_SECRET_FIELDS, UserCreate, UserUpdate

router = APIRouter(
    prefix="/api/users", tags=["users"],
    dependencies=[Depends(require_service("administration"))],
)

add_crud_routes(router, "users", UserCreate, UserUpdate, exclude=USER_SECRET_FIELDS)

routers = [router]
