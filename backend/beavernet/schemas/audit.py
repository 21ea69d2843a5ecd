"""Audit Schemas - schedules, templates, reports, non-compliances, and evidence."""

from typing import Literal

from beavernet.schemas.base import (
    BaseSchema, NonEmptyStr, OptionalDate, OptionalFloat, OptionalInt, Timestamp,
    ZeroDefaultFloat, partial_model,
)


class AuditScheduleCreate(BaseSchema):
    title: NonEmptyStr
    audit_type: Literal["recurring", "one_time"]
    facility_type: NonEmptyStr
    mission_type: NonEmptyStr
    standards_framework: NonEmptyStr
    inspector_id: NonEmptyStr
    inspector_name: NonEmptyStr
    location: NonEmptyStr
    scheduled_date: Timestamp
    frequency: Literal["daily", "weekly", "monthly", "quarterly", "annually"] | None = None
    status: Literal["scheduled", "in_progress", "completed", "cancelled"] = "scheduled"


AuditScheduleUpdate = partial_model(AuditScheduleCreate, "AuditScheduleUpdate")


class AuditTemplateCreate(BaseSchema):
    name: NonEmptyStr
    facility_type: NonEmptyStr
    mission_type: NonEmptyStr
    standards_framework: NonEmptyStr
    questions: str | None = None


AuditTemplateUpdate = partial_model(AuditTemplateCreate, "AuditTemplateUpdate")


class AuditReportCreate(BaseSchema):
    schedule_id: int
    report_number: str | None = None
    audit_date: Timestamp
    inspector_id: NonEmptyStr
    inspector_name: NonEmptyStr
    location: NonEmptyStr
    facility_type: NonEmptyStr
    mission_type: NonEmptyStr
    standards_framework: NonEmptyStr
    overall_score: ZeroDefaultFloat = 0
    total_items: OptionalInt = 0
    compliant_items: OptionalInt = 0
    non_compliant_items: OptionalInt = 0
    critical_issues: OptionalInt = 0
    responses: str | None = None
    digital_signature: str | None = None
    signed_at: OptionalDate = None
    status: Literal["draft", "completed", "reviewed", "approved"] = "draft"


AuditReportUpdate = partial_model(AuditReportCreate, "AuditReportUpdate")


class AuditNonComplianceCreate(BaseSchema):
    audit_report_id: int
    item_number: NonEmptyStr
    description: NonEmptyStr
    severity: Literal["critical", "minor", "urgent"]
    category: str | None = None
    standard_reference: str | None = None
    corrective_action: str | None = None
    assigned_to: str | None = None
    assigned_to_name: str | None = None
    due_date: OptionalDate = None
    priority: Literal["low", "medium", "high", "urgent"] = "medium"
    status: Literal["open", "in_progress", "resolved", "closed"] = "open"
    resolved_at: OptionalDate = None
    resolution_notes: str | None = None
    evidence: str | None = None


AuditNonComplianceUpdate = partial_model(AuditNonComplianceCreate, "AuditNonComplianceUpdate")


class AuditEvidenceCreate(BaseSchema):
    audit_report_id: int
    non_compliance_id: OptionalInt = None
    file_name: NonEmptyStr
    file_type: Literal["photo", "video", "pdf", "document"]
    file_size: OptionalInt = None
    file_data: str | None = None
    gps_latitude: OptionalFloat = None
    gps_longitude: OptionalFloat = None
    timestamp: OptionalDate = None
    description: str | None = None
    uploaded_by: NonEmptyStr


AuditEvidenceUpdate = partial_model(AuditEvidenceCreate, "AuditEvidenceUpdate")
