"""Animal Control Schemas - shelter intake and municipal enforcement reports."""

from typing import Literal

from beavernet.schemas.base import (
    BaseSchema, NonEmptyStr, OptionalDate, OptionalFloat, OptionalInt, Timestamp,
    partial_model,
)


class AnimalCreate(BaseSchema):
    name: str | None = None
    species: Literal["dog", "cat", "other"]
    breed: str | None = None
    color: str | None = None
    age: str | None = None
    gender: Literal["male", "female", "unknown"] | None = None
    size: Literal["small", "medium", "large"] | None = None
    health_status: Literal["healthy", "injured", "sick", "deceased"]
    health_notes: str | None = None
    found_location: str | None = None
    found_date: OptionalDate = None
    surrender_location: str | None = None
    surrender_date: OptionalDate = None
    surrender_reason: str | None = None
    is_wild: bool | None = False
    is_stray: bool | None = False
    has_owner: bool | None = False
    owner_name: str | None = None
    owner_phone: str | None = None
    owner_address: str | None = None
    owner_email: str | None = None
    microchip_number: str | None = None
    registration_number: str | None = None
    notes: str | None = None


AnimalUpdate = partial_model(AnimalCreate, "AnimalUpdate")


class EnforcementReportCreate(BaseSchema):
    report_number: str | None = None
    type: Literal["municipal_report", "ticket", "warning"]
    violation_type: NonEmptyStr
    location: NonEmptyStr
    date: Timestamp
    officer_name: NonEmptyStr
    violator_name: str | None = None
    violator_address: str | None = None
    violator_phone: str | None = None
    animal_id: OptionalInt = None
    description: NonEmptyStr
    fine_amount: OptionalFloat = None
    status: Literal["active", "paid", "contested", "dismissed"] = "active"
    due_date: OptionalDate = None


EnforcementReportUpdate = partial_model(EnforcementReportCreate, "EnforcementReportUpdate")
