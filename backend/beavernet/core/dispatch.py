"""Dispatch Workflows - pure planning for unit assignment and incident resolution.

Invariants:
    - Planning never touches storage; routes apply the returned patches
    - Resolving an incident releases every unit tied to it, whether the tie is
      an open IncidentUnit record or the unit's assigned_incident_id
    - A unit whose assigned_incident_id names another incident is never released
    - A released unit is "available" with no incident
    - Only open assignments (not "completed") are closed on resolution
    - Assigning a unit to a "new" incident moves the incident to "dispatched"
"""

from dataclasses import dataclass, field

from beavernet.core.domain_types import (
    AssignmentStatus, IncidentStatus, UnitStatus,
)

UNIT_RELEASE_PATCH = {
    "status": UnitStatus.AVAILABLE.value,
    "assigned_incident_id": None,
}
ASSIGNMENT_CLOSE_PATCH = {"status": AssignmentStatus.COMPLETED.value}


@dataclass(frozen=True)
class ReleasePlan:
    """Ids to patch when an incident is resolved."""
    unit_ids: list[int] = field(default_factory=list)
    assignment_ids: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class AssignmentPlan:
    assignment: dict
    unit_patch: dict
    incident_patch: dict | None


def triggers_release(status: str) -> bool:
    return status == IncidentStatus.RESOLVED.value


def open_assignments(incident_id: int, assignments: list[dict]) -> list[dict]:
    return [
        a for a in assignments
        if a["incident_id"] == incident_id
        and a.get("status") != AssignmentStatus.COMPLETED.value
    ]


def plan_release(incident_id: int, assignments: list[dict], units: list[dict]) -> ReleasePlan:
    """Collect units and open assignments tied to the incident, without duplicates.

    units holds the current records of every candidate unit. A unit already
    moved on to another incident keeps its dispatch state; its stale
    assignment here is still closed.
    """
    still_open = open_assignments(incident_id, assignments)
    assigned_ids = {a["unit_id"] for a in still_open}
    unit_ids: list[int] = []
    for unit in units:
        current = unit.get("assigned_incident_id")
        tied = unit["id"] in assigned_ids or current == incident_id
        if tied and current in (None, incident_id) and unit["id"] not in unit_ids:
            unit_ids.append(unit["id"])
    return ReleasePlan(unit_ids=unit_ids, assignment_ids=[a["id"] for a in still_open])


def plan_assignment(incident: dict, unit: dict) -> AssignmentPlan:
    incident_patch = None
    if incident.get("status") == IncidentStatus.NEW.value:
        incident_patch = {"status": IncidentStatus.DISPATCHED.value}
    return AssignmentPlan(
        assignment={
            "incident_id": incident["id"],
            "unit_id": unit["id"],
            "status": AssignmentStatus.ASSIGNED.value,
        },
        unit_patch={
            "status": UnitStatus.DISPATCHED.value,
            "assigned_incident_id": incident["id"],
        },
        incident_patch=incident_patch,
    )
