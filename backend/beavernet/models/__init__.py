"""ORM Models - SQLAlchemy declarative models for all BeaverNet entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Integer primary keys; foreign keys are plain integers with no FK constraint

Design Decisions:
    - One file per service area, grouping the entities a dashboard owns
    - All models imported here so Base.metadata is complete before create_all
"""

from beavernet.models.user import User  # noqa: F401
from beavernet.models.dispatch import Incident, Unit, IncidentUnit, CallEntryLog  # noqa: F401
from beavernet.models.animal_control import Animal, EnforcementReport  # noqa: F401
from beavernet.models.crm import Customer  # noqa: F401
from beavernet.models.document import Document  # noqa: F401
from beavernet.models.payments import Invoice, Payment, PosTransaction  # noqa: F401
from beavernet.models.risk import (  # noqa: F401
    RiskLocation, RiskAssessment, MitigationPlan, RiskEvent,
)
from beavernet.models.audit import (  # noqa: F401
    AuditSchedule, AuditTemplate, AuditReport, AuditNonCompliance, AuditEvidence,
)
from beavernet.models.dmv import Character, License, VehicleRegistration  # noqa: F401
