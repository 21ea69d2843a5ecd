"""Risk ORM - monitored locations, assessments, mitigation plans, and events.

Invariants:
    - Scores are 1-5 integers (validated by schemas, not constrained in SQL)
    - RiskEvent.response_time persists as column response_time_minutes
"""

from datetime import datetime

from sqlalchemy import DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from beavernet.db.base import Base, TimestampMixin


class RiskLocation(TimestampMixin, Base):
    __tablename__ = "risk_locations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    capacity: Mapped[int | None] = mapped_column(Integer)
    contact_info: Mapped[str | None] = mapped_column(Text)
    operating_hours: Mapped[str | None] = mapped_column(Text)


class RiskAssessment(TimestampMixin, Base):
    __tablename__ = "risk_assessments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    risk_type: Mapped[str] = mapped_column(String(50), nullable=False)
    location_id: Mapped[int | None] = mapped_column(Integer, index=True)
    severity_score: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    probability_score: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    human_impact: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    economic_impact: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    environmental_impact: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    risk_level: Mapped[str] = mapped_column(String(20), nullable=False, default="low")
    description: Mapped[str] = mapped_column(Text, nullable=False)
    affected_population: Mapped[int | None] = mapped_column(Integer, default=0)
    estimated_damages: Mapped[float | None] = mapped_column(Float, default=0)
    last_review_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    next_review_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")


class MitigationPlan(TimestampMixin, Base):
    __tablename__ = "mitigation_plans"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    risk_assessment_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    responsible_department: Mapped[str | None] = mapped_column(Text)
    estimated_cost: Mapped[float | None] = mapped_column(Float, default=0)
    timeline: Mapped[str | None] = mapped_column(String(20))
    priority: Mapped[str] = mapped_column(String(20), nullable=False, default="medium")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="planned")
    start_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    target_completion_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    actual_completion_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    resources: Mapped[str | None] = mapped_column(Text)
    success_metrics: Mapped[str | None] = mapped_column(Text)
    notes: Mapped[str | None] = mapped_column(Text)


class RiskEvent(TimestampMixin, Base):
    __tablename__ = "risk_events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    risk_assessment_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    event_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    event_type: Mapped[str] = mapped_column(String(20), nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    severity: Mapped[str] = mapped_column(String(20), nullable=False, default="low")
    actual_impact: Mapped[str | None] = mapped_column(Text)
    response_time: Mapped[int | None] = mapped_column("response_time_minutes", Integer)
    resources_used: Mapped[str | None] = mapped_column(Text)
    lessons_learned: Mapped[str | None] = mapped_column(Text)
    follow_up_actions: Mapped[str | None] = mapped_column(Text)
