"""DMV ORM - registry characters, driver licenses, and vehicle registrations.

Invariants:
    - license_number and plate are unique; vin and registration_number are
      unique when present
    - owner is a free-text owner reference; character_id is the integer link
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from beavernet.db.base import Base, TimestampMixin, utcnow


class Character(TimestampMixin, Base):
    __tablename__ = "characters"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sync_id: Mapped[str | None] = mapped_column(String(100), unique=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    date_of_birth: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    address: Mapped[str | None] = mapped_column(Text)
    city: Mapped[str | None] = mapped_column(String(100))
    province: Mapped[str | None] = mapped_column(String(50))
    postal_code: Mapped[str | None] = mapped_column(String(20))
    phone: Mapped[str | None] = mapped_column(String(50))
    email: Mapped[str | None] = mapped_column(String(255))
    emergency_contact: Mapped[str | None] = mapped_column(Text)
    emergency_phone: Mapped[str | None] = mapped_column(String(50))


class License(TimestampMixin, Base):
    __tablename__ = "licenses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sync_id: Mapped[str | None] = mapped_column(String(100), unique=True)
    owner: Mapped[str] = mapped_column(Text, nullable=False)
    character_id: Mapped[int | None] = mapped_column(Integer, index=True)
    type: Mapped[str] = mapped_column(String(20), nullable=False, default="DRIVERS")
    license_number: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="ACTIVE")
    expiration: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    restrictions: Mapped[str | None] = mapped_column(Text)
    endorsements: Mapped[str | None] = mapped_column(Text)
    issue_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), default=utcnow,
    )


class VehicleRegistration(TimestampMixin, Base):
    __tablename__ = "vehicle_registrations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sync_id: Mapped[str | None] = mapped_column(String(100), unique=True)
    owner: Mapped[str] = mapped_column(Text, nullable=False)
    character_id: Mapped[int | None] = mapped_column(Integer, index=True)
    vehicle_type: Mapped[str] = mapped_column(String(30), nullable=False)
    make: Mapped[str] = mapped_column(String(100), nullable=False)
    model: Mapped[str] = mapped_column(String(100), nullable=False)
    year: Mapped[str] = mapped_column(String(10), nullable=False)
    color: Mapped[str] = mapped_column(String(50), nullable=False)
    plate: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    vin: Mapped[str | None] = mapped_column(String(50), unique=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="ACTIVE")
    expiration: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    registration_number: Mapped[str | None] = mapped_column(String(50), unique=True)
    insurance_company: Mapped[str | None] = mapped_column(Text)
    insurance_policy: Mapped[str | None] = mapped_column(String(100))
    insurance_expiration: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
