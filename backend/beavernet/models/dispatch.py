"""Dispatch ORM - incidents, response units, assignments, and 911 call logs.

Invariants:
    - incident_number is unique; nullable only because it is derived from the
      id inside the insert transaction
    - Unit carries updated_at only; IncidentUnit carries assigned_at only
    - IncidentUnit.incident_id / unit_id and Unit.assigned_incident_id are
      plain integers (no FK constraint, orphans allowed)
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from beavernet.db.base import Base, CreatedAtMixin, TimestampMixin, UpdatedAtMixin, utcnow


class Incident(TimestampMixin, Base):
    __tablename__ = "incidents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    incident_number: Mapped[str | None] = mapped_column(String(50), unique=True)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    priority: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="new")
    address: Mapped[str] = mapped_column(Text, nullable=False)
    latitude: Mapped[float | None] = mapped_column(Float)
    longitude: Mapped[float | None] = mapped_column(Float)
    complainant: Mapped[str | None] = mapped_column(Text)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    people_involved: Mapped[int | None] = mapped_column(Integer, default=0)

    # 911 call information
    call_back_phone: Mapped[str | None] = mapped_column(String(50))
    landline_detection: Mapped[bool | None] = mapped_column(Boolean, default=False)
    location_phone: Mapped[str | None] = mapped_column(String(50))
    caller_name: Mapped[str | None] = mapped_column(Text)
    called_from: Mapped[str | None] = mapped_column(Text)
    nature_of_problem: Mapped[str | None] = mapped_column(Text)
    problem_code: Mapped[str | None] = mapped_column(String(20))
    map_page: Mapped[str | None] = mapped_column(String(50))
    city: Mapped[str | None] = mapped_column(String(100))
    cross_street: Mapped[str | None] = mapped_column(Text)
    comments: Mapped[str | None] = mapped_column(Text)

    # Patient triage
    with_patient_now: Mapped[bool | None] = mapped_column(Boolean)
    number_hurt_sick: Mapped[int | None] = mapped_column(Integer)
    patient_age: Mapped[str | None] = mapped_column(String(50))
    patient_gender: Mapped[str | None] = mapped_column(String(20))
    breathing_status: Mapped[str | None] = mapped_column(String(30))
    chief_complaint_code: Mapped[str | None] = mapped_column(String(50))

    # Pregnancy
    pregnancy_complications: Mapped[str | None] = mapped_column(String(50))
    pregnancy_weeks: Mapped[str | None] = mapped_column(String(50))
    baby_visible: Mapped[str | None] = mapped_column(String(50))


class Unit(UpdatedAtMixin, Base):
    __tablename__ = "units"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    unit_number: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="available")
    current_location: Mapped[str | None] = mapped_column(Text)
    latitude: Mapped[float | None] = mapped_column(Float)
    longitude: Mapped[float | None] = mapped_column(Float)
    assigned_incident_id: Mapped[int | None] = mapped_column(Integer)


class IncidentUnit(Base):
    __tablename__ = "incident_units"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    incident_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    unit_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    assigned_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="assigned")


class CallEntryLog(CreatedAtMixin, Base):
    __tablename__ = "call_entry_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    incident_id: Mapped[int | None] = mapped_column(Integer, index=True)
    call_taker_id: Mapped[int | None] = mapped_column(Integer)
    call_taker_name: Mapped[str] = mapped_column(Text, nullable=False)
    auth_method: Mapped[str] = mapped_column(String(20), nullable=False)
    entry_time: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), default=utcnow,
    )
    session_id: Mapped[str] = mapped_column(String(100), nullable=False)
    ip_address: Mapped[str | None] = mapped_column(String(64))
    user_agent: Mapped[str | None] = mapped_column(Text)
