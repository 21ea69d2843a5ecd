"""Audit Routes - BeaverAudit schedules, templates, reports, findings, and evidence."""

from fastapi import APIRouter, Depends

from beavernet.api.dependencies import get_storage, require_service
from beavernet.api.routes.crud import add_crud_routes
from beavernet.schemas.audit import (
    AuditEvidenceCreate, AuditEvidenceUpdate, AuditNonComplianceCreate,
    AuditNonComplianceUpdate, AuditReportCreate, AuditReportUpdate,
    AuditScheduleCreate, AuditScheduleUpdate, AuditTemplateCreate,
    AuditTemplateUpdate,
)
from beavernet.schemas.base import to_response_list
from beavernet.storage.base import Storage

_guard = [Depends(require_service("beaveraudit"))]

schedules_router = APIRouter(prefix="/api/audit-schedules", tags=["audit"], dependencies=_guard)
templates_router = APIRouter(prefix="/api/audit-templates", tags=["audit"], dependencies=_guard)
reports_router = APIRouter(prefix="/api/audit-reports", tags=["audit"], dependencies=_guard)
findings_router = APIRouter(
    prefix="/api/audit-non-compliances", tags=["audit"], dependencies=_guard,
)
evidence_router = APIRouter(prefix="/api/audit-evidence", tags=["audit"], dependencies=_guard)


@schedules_router.get("/{schedule_id}/reports")
async def list_schedule_reports(schedule_id: int, storage: Storage = Depends(get_storage)):
    return to_response_list(await storage.get_audit_reports_for_schedule(schedule_id))


@reports_router.get("/{report_id}/non-compliances")
async def list_report_findings(report_id: int, storage: Storage = Depends(get_storage)):
    return to_response_list(await storage.get_non_compliances(report_id))


@reports_router.get("/{report_id}/evidence")
async def list_report_evidence(report_id: int, storage: Storage = Depends(get_storage)):
    return to_response_list(await storage.get_audit_evidence(report_id))


add_crud_routes(schedules_router, "audit_schedules", AuditScheduleCreate, AuditScheduleUpdate)
add_crud_routes(templates_router, "audit_templates", AuditTemplateCreate, AuditTemplateUpdate)
add_crud_routes(reports_router, "audit_reports", AuditReportCreate, AuditReportUpdate)
add_crud_routes(
    findings_router, "audit_non_compliances",
    AuditNonComplianceCreate, AuditNonComplianceUpdate,
)
add_crud_routes(evidence_router, "audit_evidence", AuditEvidenceCreate, AuditEvidenceUpdate)

routers = [
    schedules_router, templates_router, reports_router, findings_router, evidence_router,
]
