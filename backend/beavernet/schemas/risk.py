"""Risk Schemas - monitored locations, assessments, mitigation plans, and events.

Invariants:
    - Severity, probability and impact scores are integers in 1..5
    - Risk events require an event date; other dates are optional
"""

from typing import Literal

from beavernet.schemas.base import (
    BaseSchema, NonEmptyStr, OptionalDate, OptionalInt, Score, Timestamp,
    ZeroDefaultFloat, partial_model,
)

RiskLevel = Literal["low", "medium", "high", "critical"]
Priority = Literal["low", "medium", "high", "urgent"]


class RiskLocationCreate(BaseSchema):
    name: NonEmptyStr
    type: NonEmptyStr
    address: NonEmptyStr
    latitude: float
    longitude: float
    description: str | None = None
    capacity: OptionalInt = None
    contact_info: str | None = None
    operating_hours: str | None = None


RiskLocationUpdate = partial_model(RiskLocationCreate, "RiskLocationUpdate")


class RiskAssessmentCreate(BaseSchema):
    title: NonEmptyStr
    risk_type: NonEmptyStr
    location_id: OptionalInt = None
    severity_score: Score = 1
    probability_score: Score = 1
    human_impact: Score = 1
    economic_impact: Score = 1
    environmental_impact: Score = 1
    risk_level: RiskLevel = "low"
    description: NonEmptyStr
    affected_population: OptionalInt = 0
    estimated_damages: ZeroDefaultFloat = 0
    last_review_date: OptionalDate = None
    next_review_date: OptionalDate = None
    status: Literal["active", "mitigated", "archived"] = "active"


RiskAssessmentUpdate = partial_model(RiskAssessmentCreate, "RiskAssessmentUpdate")


class MitigationPlanCreate(BaseSchema):
    risk_assessment_id: int
    title: NonEmptyStr
    description: NonEmptyStr
    responsible_department: str | None = None
    estimated_cost: ZeroDefaultFloat = 0
    timeline: Literal["immediate", "short_term", "long_term"] | None = None
    priority: Priority = "medium"
    status: Literal["planned", "in_progress", "completed", "cancelled"] = "planned"
    start_date: OptionalDate = None
    target_completion_date: OptionalDate = None
    actual_completion_date: OptionalDate = None
    resources: str | None = None
    success_metrics: str | None = None
    notes: str | None = None


MitigationPlanUpdate = partial_model(MitigationPlanCreate, "MitigationPlanUpdate")


class RiskEventCreate(BaseSchema):
    risk_assessment_id: int
    event_date: Timestamp
    event_type: Literal["incident", "drill", "exercise", "review"]
    title: NonEmptyStr
    description: NonEmptyStr
    severity: RiskLevel = "low"
    actual_impact: str | None = None
    response_time: OptionalInt = None
    resources_used: str | None = None
    lessons_learned: str | None = None
    follow_up_actions: str | None = None


RiskEventUpdate = partial_model(RiskEventCreate, "RiskEventUpdate")
