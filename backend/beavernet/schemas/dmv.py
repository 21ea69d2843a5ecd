"""DMV Schemas - registry characters, licenses, and vehicle registrations."""

from typing import Literal

from beavernet.schemas.base import (
    BaseSchema, NonEmptyStr, OptionalDate, OptionalInt, Timestamp, partial_model,
)


class CharacterCreate(BaseSchema):
    sync_id: str | None = None
    first_name: NonEmptyStr
    last_name: NonEmptyStr
    date_of_birth: OptionalDate = None
    address: str | None = None
    city: str | None = None
    province: str | None = None
    postal_code: str | None = None
    phone: str | None = None
    email: str | None = None
    emergency_contact: str | None = None
    emergency_phone: str | None = None


CharacterUpdate = partial_model(CharacterCreate, "CharacterUpdate")


class LicenseCreate(BaseSchema):
    sync_id: str | None = None
    owner: NonEmptyStr
    character_id: OptionalInt = None
    type: NonEmptyStr = "DRIVERS"
    license_number: NonEmptyStr
    status: Literal["ACTIVE", "SUSPENDED", "EXPIRED", "REVOKED"] = "ACTIVE"
    expiration: Timestamp
    restrictions: str | None = None
    endorsements: str | None = None
    issue_date: OptionalDate = None


LicenseUpdate = partial_model(LicenseCreate, "LicenseUpdate")


class VehicleRegistrationCreate(BaseSchema):
    sync_id: str | None = None
    owner: NonEmptyStr
    character_id: OptionalInt = None
    vehicle_type: NonEmptyStr
    make: NonEmptyStr
    model: NonEmptyStr
    year: NonEmptyStr
    color: NonEmptyStr
    plate: NonEmptyStr
    vin: str | None = None
    status: Literal["ACTIVE", "EXPIRED", "SUSPENDED", "STOLEN"] = "ACTIVE"
    expiration: Timestamp
    registration_number: str | None = None
    insurance_company: str | None = None
    insurance_policy: str | None = None
    insurance_expiration: OptionalDate = None


VehicleRegistrationUpdate = partial_model(VehicleRegistrationCreate, "VehicleRegistrationUpdate")
