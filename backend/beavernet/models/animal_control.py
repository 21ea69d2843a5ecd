"""Animal Control ORM - sheltered animals and municipal enforcement reports."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from beavernet.db.base import Base, TimestampMixin


class Animal(TimestampMixin, Base):
    __tablename__ = "animals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(100))
    species: Mapped[str] = mapped_column(String(50), nullable=False)
    breed: Mapped[str | None] = mapped_column(String(100))
    color: Mapped[str | None] = mapped_column(String(100))
    age: Mapped[str | None] = mapped_column(String(50))
    gender: Mapped[str | None] = mapped_column(String(20))
    size: Mapped[str | None] = mapped_column(String(20))
    health_status: Mapped[str] = mapped_column(String(20), nullable=False)
    health_notes: Mapped[str | None] = mapped_column(Text)
    found_location: Mapped[str | None] = mapped_column(Text)
    found_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    surrender_location: Mapped[str | None] = mapped_column(Text)
    surrender_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    surrender_reason: Mapped[str | None] = mapped_column(Text)
    is_wild: Mapped[bool | None] = mapped_column(Boolean, default=False)
    is_stray: Mapped[bool | None] = mapped_column(Boolean, default=False)
    has_owner: Mapped[bool | None] = mapped_column(Boolean, default=False)
    owner_name: Mapped[str | None] = mapped_column(Text)
    owner_phone: Mapped[str | None] = mapped_column(String(50))
    owner_address: Mapped[str | None] = mapped_column(Text)
    owner_email: Mapped[str | None] = mapped_column(String(255))
    microchip_number: Mapped[str | None] = mapped_column(String(100))
    registration_number: Mapped[str | None] = mapped_column(String(100), unique=True)
    notes: Mapped[str | None] = mapped_column(Text)


class EnforcementReport(TimestampMixin, Base):
    __tablename__ = "enforcement_reports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    report_number: Mapped[str | None] = mapped_column(String(50), unique=True)
    type: Mapped[str] = mapped_column(String(30), nullable=False)
    violation_type: Mapped[str] = mapped_column(String(100), nullable=False)
    location: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    officer_name: Mapped[str] = mapped_column(Text, nullable=False)
    violator_name: Mapped[str | None] = mapped_column(Text)
    violator_address: Mapped[str | None] = mapped_column(Text)
    violator_phone: Mapped[str | None] = mapped_column(String(50))
    animal_id: Mapped[int | None] = mapped_column(Integer, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    fine_amount: Mapped[float | None] = mapped_column(Float)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")
    due_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
