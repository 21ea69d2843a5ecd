"""Dispatch Schemas - incidents, units, assignments, and 911 call entry logs.

Invariants:
    - Incident priority/status, unit type/status and assignment status are
      closed vocabularies (Literal)
    - incident_number is optional; the storage layer derives it when absent
    - Call entry logs require a call taker name, auth method and session id
"""

from typing import Literal

from beavernet.schemas.base import (
    BaseSchema, NonEmptyStr, OptionalDate, OptionalFloat, OptionalInt, partial_model,
)

IncidentPriority = Literal["high", "medium", "low"]
IncidentStatusLiteral = Literal["new", "dispatched", "active", "resolved"]
UnitType = Literal["police", "fire", "ambulance"]
UnitStatusLiteral = Literal[
    "available", "dispatched", "responding", "enroute", "busy", "off_duty",
]
AssignmentStatusLiteral = Literal["assigned", "enroute", "arrived", "completed"]


class IncidentCreate(BaseSchema):
    incident_number: str | None = None
    type: NonEmptyStr
    priority: IncidentPriority
    status: IncidentStatusLiteral = "new"
    address: NonEmptyStr
    latitude: OptionalFloat = None
    longitude: OptionalFloat = None
    complainant: str | None = None
    description: NonEmptyStr
    people_involved: OptionalInt = 0

    # 911 call information
    call_back_phone: str | None = None
    landline_detection: bool | None = None
    location_phone: str | None = None
    caller_name: str | None = None
    called_from: str | None = None
    nature_of_problem: str | None = None
    problem_code: Literal["red", "yellow", "blue"] | None = None
    map_page: str | None = None
    city: str | None = None
    cross_street: str | None = None
    comments: str | None = None

    # Patient triage
    with_patient_now: bool | None = None
    number_hurt_sick: OptionalInt = None
    patient_age: str | None = None
    patient_gender: str | None = None
    breathing_status: str | None = None
    chief_complaint_code: str | None = None

    # Pregnancy
    pregnancy_complications: str | None = None
    pregnancy_weeks: str | None = None
    baby_visible: str | None = None


IncidentUpdate = partial_model(IncidentCreate, "IncidentUpdate")


class UnitCreate(BaseSchema):
    unit_number: NonEmptyStr
    type: UnitType
    status: UnitStatusLiteral = "available"
    current_location: str | None = None
    latitude: OptionalFloat = None
    longitude: OptionalFloat = None
    assigned_incident_id: OptionalInt = None


UnitUpdate = partial_model(UnitCreate, "UnitUpdate")


class AssignUnitRequest(BaseSchema):
    unit_id: int


class IncidentStatusRequest(BaseSchema):
    status: IncidentStatusLiteral


class CallEntryLogCreate(BaseSchema):
    incident_id: OptionalInt = None
    call_taker_id: OptionalInt = None
    call_taker_name: NonEmptyStr
    auth_method: Literal["pin", "chip_card"]
    entry_time: OptionalDate = None
    session_id: NonEmptyStr
    ip_address: str | None = None
    user_agent: str | None = None


CallEntryLogUpdate = partial_model(CallEntryLogCreate, "CallEntryLogUpdate")
