"""Audit ORM - compliance schedules, templates, reports, findings, and evidence.

Invariants:
    - AuditReport.report_number is unique, derived at insert when absent
    - AuditEvidence has created_at only (no updated_at column)
    - questions / responses / evidence columns hold JSON text as submitted
"""

from datetime import datetime

from sqlalchemy import DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from beavernet.db.base import Base, CreatedAtMixin, TimestampMixin, utcnow


class AuditSchedule(TimestampMixin, Base):
    __tablename__ = "audit_schedules"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    audit_type: Mapped[str] = mapped_column(String(20), nullable=False)
    facility_type: Mapped[str] = mapped_column(String(50), nullable=False)
    mission_type: Mapped[str] = mapped_column(String(50), nullable=False)
    standards_framework: Mapped[str] = mapped_column(String(50), nullable=False)
    inspector_id: Mapped[str] = mapped_column(String(50), nullable=False)
    inspector_name: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str] = mapped_column(Text, nullable=False)
    scheduled_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    frequency: Mapped[str | None] = mapped_column(String(20))
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="scheduled")


class AuditTemplate(TimestampMixin, Base):
    __tablename__ = "audit_templates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    facility_type: Mapped[str] = mapped_column(String(50), nullable=False)
    mission_type: Mapped[str] = mapped_column(String(50), nullable=False)
    standards_framework: Mapped[str] = mapped_column(String(50), nullable=False)
    questions: Mapped[str | None] = mapped_column(Text)


class AuditReport(TimestampMixin, Base):
    __tablename__ = "audit_reports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    schedule_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    report_number: Mapped[str | None] = mapped_column(String(50), unique=True)
    audit_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    inspector_id: Mapped[str] = mapped_column(String(50), nullable=False)
    inspector_name: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str] = mapped_column(Text, nullable=False)
    facility_type: Mapped[str] = mapped_column(String(50), nullable=False)
    mission_type: Mapped[str] = mapped_column(String(50), nullable=False)
    standards_framework: Mapped[str] = mapped_column(String(50), nullable=False)
    overall_score: Mapped[float | None] = mapped_column(Float, default=0)
    total_items: Mapped[int | None] = mapped_column(Integer, default=0)
    compliant_items: Mapped[int | None] = mapped_column(Integer, default=0)
    non_compliant_items: Mapped[int | None] = mapped_column(Integer, default=0)
    critical_issues: Mapped[int | None] = mapped_column(Integer, default=0)
    responses: Mapped[str | None] = mapped_column(Text)
    digital_signature: Mapped[str | None] = mapped_column(Text)
    signed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="draft")


class AuditNonCompliance(TimestampMixin, Base):
    __tablename__ = "audit_non_compliances"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    audit_report_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    item_number: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    severity: Mapped[str] = mapped_column(String(20), nullable=False)
    category: Mapped[str | None] = mapped_column(String(50))
    standard_reference: Mapped[str | None] = mapped_column(Text)
    corrective_action: Mapped[str | None] = mapped_column(Text)
    assigned_to: Mapped[str | None] = mapped_column(String(50))
    assigned_to_name: Mapped[str | None] = mapped_column(Text)
    due_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    priority: Mapped[str] = mapped_column(String(20), nullable=False, default="medium")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="open")
    resolved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    resolution_notes: Mapped[str | None] = mapped_column(Text)
    evidence: Mapped[str | None] = mapped_column(Text)


class AuditEvidence(CreatedAtMixin, Base):
    __tablename__ = "audit_evidence"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    audit_report_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    non_compliance_id: Mapped[int | None] = mapped_column(Integer, index=True)
    file_name: Mapped[str] = mapped_column(Text, nullable=False)
    file_type: Mapped[str] = mapped_column(String(20), nullable=False)
    file_size: Mapped[int | None] = mapped_column(Integer)
    file_data: Mapped[str | None] = mapped_column(Text)
    gps_latitude: Mapped[float | None] = mapped_column(Float)
    gps_longitude: Mapped[float | None] = mapped_column(Float)
    timestamp: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), default=utcnow,
    )
    description: Mapped[str | None] = mapped_column(Text)
    uploaded_by: Mapped[str] = mapped_column(Text, nullable=False)
