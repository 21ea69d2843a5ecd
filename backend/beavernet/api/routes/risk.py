"""Risk Routes - BeaverRisk locations, assessments, mitigation plans, and events."""

from fastapi import APIRouter, Depends

from beavernet.api.dependencies import get_storage, require_service
from beavernet.api.routes.crud import add_crud_routes
from beavernet.schemas.base import to_response_list
from beavernet.schemas.risk import (
    MitigationPlanCreate, MitigationPlanUpdate, RiskAssessmentCreate,
    RiskAssessmentUpdate, RiskEventCreate, RiskEventUpdate, RiskLocationCreate,
    RiskLocationUpdate,
)
from beavernet.storage.base import Storage

_guard = [Depends(require_service("beaverrisk"))]

locations_router = APIRouter(prefix="/api/risk-locations", tags=["risk"], dependencies=_guard)
assessments_router = APIRouter(prefix="/api/risk-assessments", tags=["risk"], dependencies=_guard)
plans_router = APIRouter(prefix="/api/mitigation-plans", tags=["risk"], dependencies=_guard)
events_router = APIRouter(prefix="/api/risk-events", tags=["risk"], dependencies=_guard)


@locations_router.get("/{location_id}/assessments")
async def list_location_assessments(location_id: int, storage: Storage = Depends(get_storage)):
    return to_response_list(await storage.get_assessments_for_location(location_id))


@assessments_router.get("/{assessment_id}/mitigation-plans")
async def list_assessment_plans(assessment_id: int, storage: Storage = Depends(get_storage)):
    return to_response_list(await storage.get_mitigation_plans(assessment_id))


@assessments_router.get("/{assessment_id}/events")
async def list_assessment_events(assessment_id: int, storage: Storage = Depends(get_storage)):
    return to_response_list(await storage.get_risk_events(assessment_id))


add_crud_routes(locations_router, "risk_locations", RiskLocationCreate, RiskLocationUpdate)
add_crud_routes(
    assessments_router, "risk_assessments", RiskAssessmentCreate, RiskAssessmentUpdate,
)
add_crud_routes(plans_router, "mitigation_plans", MitigationPlanCreate, MitigationPlanUpdate)
add_crud_routes(events_router, "risk_events", RiskEventCreate, RiskEventUpdate)

routers = [locations_router, assessments_router, plans_router, events_router]
