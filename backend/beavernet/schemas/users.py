"""User Schemas - staff accounts, profile edits, and 911 step-up credentials.

Invariants:
    - USER_SECRET_FIELDS never appear in a response body
    - Profile edits cannot touch username, password, access level or the
      call-taker secrets
"""

from typing import Literal

from pydantic import Field

from beavernet.schemas.base import BaseSchema, NonEmptyStr, partial_model

USER_SECRET_FIELDS = ("password", "employee_pin", "chip_card_id")

AccessLevelLiteral = Literal[
    "SuperAdmin", "Admin", "IT Web Support", "911 Supervisor", "911 Dispatcher", "User",
]


class UserProfileUpdate(BaseSchema):
    """Fields a signed-in user may change on their own record."""
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    department: str | None = None
    position: str | None = None
    phone: str | None = None
    avatar: str | None = None


class UserCreate(UserProfileUpdate):
    username: NonEmptyStr
    password: NonEmptyStr
    access_level: AccessLevelLiteral = "User"
    employee_pin: str | None = None
    chip_card_id: str | None = None
    is_active: bool = True


UserUpdate = partial_model(UserCreate, "UserUpdate")


class VerifyPinRequest(BaseSchema):
    user_id: int
    pin: str = Field(min_length=1)


class VerifyChipCardRequest(BaseSchema):
    chip_card_id: str = Field(min_length=1)
