"""Animal Control Routes - BeaverPaws shelter records and BeaverLaw enforcement."""

from fastapi import APIRouter, Depends, Query

from beavernet.api.dependencies import get_storage, require_service
from beavernet.api.routes.crud import add_crud_routes
from beavernet.schemas.animal_control import (
    AnimalCreate, AnimalUpdate, EnforcementReportCreate, EnforcementReportUpdate,
)
from beavernet.schemas.base import to_response_list
from beavernet.storage.base import Storage

animals_router = APIRouter(
    prefix="/api/animals", tags=["animal-control"],
    dependencies=[Depends(require_service("beaverpaws"))],
)
enforcement_router = APIRouter(
    prefix="/api/enforcement-reports", tags=["animal-control"],
    dependencies=[Depends(require_service("beaverlaw"))],
)


@animals_router.get("/search")
async def search_animals(
    owner: str = Query(min_length=1), storage: Storage = Depends(get_storage),
):
    """Case-insensitive substring match on the owner's name."""
    return to_response_list(await storage.find_animals_by_owner(owner))


@animals_router.get("/{animal_id}/enforcement-reports")
async def list_animal_reports(animal_id: int, storage: Storage = Depends(get_storage)):
    return to_response_list(await storage.get_enforcement_reports_for_animal(animal_id))


add_crud_routes(animals_router, "animals", AnimalCreate, AnimalUpdate)
add_crud_routes(
    enforcement_router, "enforcement_reports",
    EnforcementReportCreate, EnforcementReportUpdate,
)

routers = [animals_router, enforcement_router]
