"""Dispatch Routes - incidents, units, call entry logs, and the dispatch workflows.

Invariants:
    - All routes require a BeaverPatch access level
    - Assign: incident and unit must both exist (404 otherwise), then the
      assignment is created, the unit dispatched, and a "new" incident moved
      to "dispatched"
    - Status -> "resolved" releases every tied unit not since moved to another
      incident, and closes open assignments
    - Cascades are sequential storage calls; a failure midway is not undone

Design Decisions:
    - Planning lives in core/dispatch.py (pure); this module only does the IO
"""

import logging

from fastapi import APIRouter, Depends

from beavernet.api.dependencies import get_storage, require_service
from beavernet.api.routes.crud import add_crud_routes, get_or_404
from beavernet.core.dispatch import (
    ASSIGNMENT_CLOSE_PATCH, UNIT_RELEASE_PATCH, open_assignments, plan_assignment,
    plan_release, triggers_release,
)
from beavernet.schemas.base import to_response, to_response_list
from beavernet.schemas.dispatch import (
    AssignUnitRequest, CallEntryLogCreate, CallEntryLogUpdate, IncidentCreate,
    IncidentStatusRequest, IncidentUpdate, UnitCreate, UnitUpdate,
)
from beavernet.storage.base import Storage

logger = logging.getLogger(__name__)

_guard = [Depends(require_service("beaverpatch"))]

incidents_router = APIRouter(prefix="/api/incidents", tags=["dispatch"], dependencies=_guard)
units_router = APIRouter(prefix="/api/units", tags=["dispatch"], dependencies=_guard)
call_logs_router = APIRouter(prefix="/api/call-entry-logs", tags=["dispatch"], dependencies=_guard)


@incidents_router.post("/{incident_id}/assign")
async def assign_unit(
    incident_id: int, body: AssignUnitRequest, storage: Storage = Depends(get_storage),
):
    """Attach a unit to an incident and dispatch it."""
    incident = await get_or_404(storage, "incidents", incident_id)
    unit = await get_or_404(storage, "units", body.unit_id)

    plan = plan_assignment(incident, unit)
    assignment = await storage.incident_units.create(plan.assignment)
    unit = await storage.units.update(unit["id"], plan.unit_patch)
    if plan.incident_patch:
        incident = await storage.incidents.update(incident_id, plan.incident_patch)

    logger.info(
        f"Unit {body.unit_id} assigned to incident {incident_id}",
        extra={"collection": "incident_units", "record_id": assignment["id"]},
    )
    return {
        "assignment": to_response(assignment),
        "unit": to_response(unit),
        "incident": to_response(incident),
    }


@incidents_router.post("/{incident_id}/status")
async def update_incident_status(
    incident_id: int, body: IncidentStatusRequest, storage: Storage = Depends(get_storage),
):
    """Set the incident status; resolving releases its units."""
    await get_or_404(storage, "incidents", incident_id)
    incident = await storage.incidents.update(incident_id, {"status": body.status})

    if triggers_release(body.status):
        assignments = await storage.get_incident_units(incident_id)
        units = await storage.get_units_for_incident(incident_id)
        known = {unit["id"] for unit in units}
        for assignment in open_assignments(incident_id, assignments):
            if assignment["unit_id"] in known:
                continue
            unit = await storage.units.get(assignment["unit_id"])
            if unit is not None:
                units.append(unit)
                known.add(unit["id"])

        plan = plan_release(incident_id, assignments, units)
        for unit_id in plan.unit_ids:
            await storage.units.update(unit_id, UNIT_RELEASE_PATCH)
        for assignment_id in plan.assignment_ids:
            await storage.incident_units.update(assignment_id, ASSIGNMENT_CLOSE_PATCH)
        logger.info(
            f"Incident {incident_id} resolved, released {len(plan.unit_ids)} units",
            extra={"collection": "incidents", "record_id": incident_id},
        )
    return to_response(incident)


@incidents_router.get("/{incident_id}/units")
async def list_incident_units(incident_id: int, storage: Storage = Depends(get_storage)):
    return to_response_list(await storage.get_incident_units(incident_id))


@incidents_router.get("/{incident_id}/call-entry-logs")
async def list_incident_call_logs(incident_id: int, storage: Storage = Depends(get_storage)):
    return to_response_list(await storage.get_call_entry_logs_for_incident(incident_id))


@units_router.get("/{unit_id}/assignments")
async def list_unit_assignments(unit_id: int, storage: Storage = Depends(get_storage)):
    return to_response_list(await storage.get_unit_assignments(unit_id))


add_crud_routes(incidents_router, "incidents", IncidentCreate, IncidentUpdate)
add_crud_routes(units_router, "units", UnitCreate, UnitUpdate)
add_crud_routes(call_logs_router, "call_entry_logs", CallEntryLogCreate, CallEntryLogUpdate)

routers = [incidents_router, units_router, call_logs_router]
