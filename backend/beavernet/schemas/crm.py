"""CRM Schemas - citizen/customer records."""

from typing import Literal

from beavernet.schemas.base import BaseSchema, NonEmptyStr, OptionalDate, partial_model


class CustomerCreate(BaseSchema):
    customer_id: str | None = None
    last_name: NonEmptyStr
    first_name: NonEmptyStr
    phonetic_name: str | None = None
    nickname: str | None = None
    date_of_birth: OptionalDate = None
    home_phone: str | None = None
    work_phone: str | None = None
    work_extension: str | None = None
    email: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    group: str | None = None
    professional_info: str | None = None
    professional_license_number: str | None = None
    driver_license_number: str | None = None
    notes: str | None = None
    status: Literal["active", "inactive", "suspended"] = "active"


CustomerUpdate = partial_model(CustomerCreate, "CustomerUpdate")
