"""DMV Routes - BeaverDMV characters, licenses, vehicle registrations, and lookups.

Invariants:
    - Licence and vehicle lookups answer {license|vehicle, character}; the
      character is null when the owner reference resolves to nothing
    - A record's character is found by character_id, falling back to the
      owner field read as a sync id
    - Vehicle search needs plate or vin (400 otherwise); plate wins when both
"""

from fastapi import APIRouter, Depends, Query
from fastapi.exceptions import RequestValidationError

from beavernet.api.dependencies import get_storage, require_service
from beavernet.api.routes.crud import add_crud_routes
from beavernet.core.errors import ResourceNotFoundError
from beavernet.schemas.base import to_response, to_response_list
from beavernet.schemas.dmv import (
    CharacterCreate, CharacterUpdate, LicenseCreate, LicenseUpdate,
    VehicleRegistrationCreate, VehicleRegistrationUpdate,
)
from beavernet.storage.base import Storage

_guard = [Depends(require_service("beaverdmv"))]

characters_router = APIRouter(prefix="/api/characters", tags=["dmv"], dependencies=_guard)
licenses_router = APIRouter(prefix="/api/licenses", tags=["dmv"], dependencies=_guard)
vehicles_router = APIRouter(prefix="/api/vehicles", tags=["dmv"], dependencies=_guard)


async def _owner_of(storage: Storage, record: dict) -> dict | None:
    if record.get("character_id") is not None:
        character = await storage.characters.get(record["character_id"])
        if character is not None:
            return character
    return await storage.get_character_by_sync_id(record["owner"])


@characters_router.get("/{character_id}/licenses")
async def list_character_licenses(character_id: int, storage: Storage = Depends(get_storage)):
    return to_response_list(await storage.get_licenses_for_character(character_id))


@characters_router.get("/{character_id}/vehicles")
async def list_character_vehicles(character_id: int, storage: Storage = Depends(get_storage)):
    return to_response_list(await storage.get_vehicles_for_character(character_id))


@licenses_router.get("/search")
async def search_license(
    license_number: str = Query(alias="licenseNumber", min_length=1),
    storage: Storage = Depends(get_storage),
):
    license_record = await storage.get_license_by_number(license_number)
    if license_record is None:
        raise ResourceNotFoundError("License", license_number)
    character = await _owner_of(storage, license_record)
    return {
        "license": to_response(license_record),
        "character": to_response(character) if character else None,
    }


@vehicles_router.get("/search")
async def search_vehicle(
    plate: str | None = Query(None),
    vin: str | None = Query(None),
    storage: Storage = Depends(get_storage),
):
    if plate:
        vehicle = await storage.get_vehicle_by_plate(plate)
    elif vin:
        vehicle = await storage.get_vehicle_by_vin(vin)
    else:
        raise RequestValidationError([{
            "loc": ("query", "plate"),
            "msg": "plate or vin is required",
            "type": "missing",
        }])
    if vehicle is None:
        raise ResourceNotFoundError("Vehicle registration", plate or vin)
    character = await _owner_of(storage, vehicle)
    return {
        "vehicle": to_response(vehicle),
        "character": to_response(character) if character else None,
    }


add_crud_routes(characters_router, "characters", CharacterCreate, CharacterUpdate)
add_crud_routes(licenses_router, "licenses", LicenseCreate, LicenseUpdate)
add_crud_routes(
    vehicles_router, "vehicle_registrations",
    VehicleRegistrationCreate, VehicleRegistrationUpdate,
)

routers = [characters_router, licenses_router, vehicles_router]
