"""CRUD Route Builder - list/get/create/update endpoints for one collection.

Invariants:
    - GET "" lists, GET /{id} reads (404 when absent), POST "" creates (201),
      PUT and PATCH /{id} apply a partial update (404 when absent)
    - Bodies are validated by the collection's pydantic schemas before any
      storage call; only fields the client sent are written
    - Responses are camelCase; fields in `exclude` never leave the server
    - No DELETE route exists

Design Decisions:
    - Routers register their extra read endpoints (search, sub-resources)
      BEFORE calling add_crud_routes, so "/search" is not captured by "/{record_id}"
"""

import logging

from fastapi import APIRouter, Depends, status

from beavernet.api.dependencies import get_storage
from beavernet.core.errors import ResourceNotFoundError
from beavernet.schemas.base import BaseSchema, to_response, to_response_list
from beavernet.storage.base import Storage
from beavernet.storage.registry import SPECS_BY_NAME

logger = logging.getLogger(__name__)


async def get_or_404(storage: Storage, collection: str, record_id: int) -> dict:
    """Fetch one record or raise ResourceNotFoundError with the collection label."""
    record = await storage.collection(collection).get(record_id)
    if record is None:
        raise ResourceNotFoundError(SPECS_BY_NAME[collection].label, record_id)
    return record


def add_crud_routes(
    router: APIRouter,
    collection: str,
    create_schema: type[BaseSchema],
    update_schema: type[BaseSchema],
    exclude: tuple[str, ...] = (),
) -> APIRouter:
    """Attach the standard endpoints for `collection` to `router`."""
    label = SPECS_BY_NAME[collection].label

    async def list_records(storage: Storage = Depends(get_storage)):
        records = await storage.collection(collection).get_all()
        return to_response_list(records, exclude)

    async def get_record(record_id: int, storage: Storage = Depends(get_storage)):
        record = await get_or_404(storage, collection, record_id)
        return to_response(record, exclude)

    async def create_record(
        body: create_schema, storage: Storage = Depends(get_storage),
    ):
        record = await storage.collection(collection).create(body.to_record())
        logger.info(
            f"{label} created",
            extra={"collection": collection, "record_id": record["id"]},
        )
        return to_response(record, exclude)

    async def update_record(
        record_id: int, body: update_schema, storage: Storage = Depends(get_storage),
    ):
        record = await storage.collection(collection).update(record_id, body.to_record())
        if record is None:
            raise ResourceNotFoundError(label, record_id)
        return to_response(record, exclude)

    router.add_api_route("", list_records, methods=["GET"], name=f"list_{collection}")
    router.add_api_route(
        "", create_record, methods=["POST"],
        status_code=status.HTTP_201_CREATED, name=f"create_{collection}",
    )
    router.add_api_route(
        "/{record_id}", get_record, methods=["GET"], name=f"get_{collection}",
    )
    router.add_api_route(
        "/{record_id}", update_record, methods=["PUT"], name=f"replace_{collection}",
    )
    router.add_api_route(
        "/{record_id}", update_record, methods=["PATCH"], name=f"update_{collection}",
    )
    return router
