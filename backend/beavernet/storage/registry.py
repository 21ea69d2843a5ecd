"""Collection Registry - one CollectionSpec per entity, shared by both backends.

Invariants:
    - Every entity collection is declared exactly once, in COLLECTIONS
    - created_field is immutable after insert; updated_field is refreshed on update
    - order_by lists (field, descending) pairs; empty means insertion order
    - Column defaults come from the ORM model, so both backends fill the same
      values for fields the caller left out
"""

from dataclasses import dataclass, field

from sqlalchemy import inspect as sa_inspect

from beavernet.core.identifiers import (
    Deriver,
    audit_report_codes,
    customer_codes,
    document_codes,
    enforcement_report_codes,
    incident_codes,
    invoice_codes,
    payment_codes,
    pos_transaction_codes,
)
from beavernet.db.base import Base
from beavernet import models


@dataclass(frozen=True)
class CollectionSpec:
    name: str
    model: type[Base]
    label: str
    created_field: str | None = "created_at"
    updated_field: str | None = "updated_at"
    order_by: tuple[tuple[str, bool], ...] = ()
    derive: Deriver | None = None
    columns: tuple[str, ...] = field(init=False, compare=False)
    defaults: dict = field(init=False, compare=False)
    default_factories: dict = field(init=False, compare=False)

    def __post_init__(self):
        mapper = sa_inspect(self.model)
        object.__setattr__(
            self, "columns", tuple(attr.key for attr in mapper.column_attrs),
        )
        scalars, factories = _column_defaults(mapper)
        object.__setattr__(self, "defaults", scalars)
        object.__setattr__(self, "default_factories", factories)

    def initial_values(self) -> dict:
        """One value per column: the model default, or None."""
        values = {key: self.defaults.get(key) for key in self.columns}
        for key, factory in self.default_factories.items():
            values[key] = factory(None)
        return values

    @property
    def protected_fields(self) -> frozenset[str]:
        """Fields update() never overwrites."""
        return frozenset(f for f in ("id", self.created_field) if f)


def _column_defaults(mapper) -> tuple[dict, dict]:
    scalars, factories = {}, {}
    for attr in mapper.column_attrs:
        default = attr.columns[0].default
        if default is None:
            continue
        if default.is_scalar:
            scalars[attr.key] = default.arg
        elif default.is_callable:
            # SQLAlchemy wraps zero-arg callables to take an execution context
            factories[attr.key] = default.arg
    return scalars, factories


COLLECTIONS: tuple[CollectionSpec, ...] = (
    CollectionSpec("users", models.User, "User"),
    CollectionSpec(
        "incidents", models.Incident, "Incident", derive=incident_codes,
    ),
    CollectionSpec("units", models.Unit, "Unit", created_field=None),
    CollectionSpec(
        "incident_units", models.IncidentUnit, "Incident assignment",
        created_field="assigned_at", updated_field=None,
    ),
    CollectionSpec(
        "call_entry_logs", models.CallEntryLog, "Call entry log",
        updated_field=None, order_by=(("entry_time", True),),
    ),
    CollectionSpec("animals", models.Animal, "Animal"),
    CollectionSpec(
        "enforcement_reports", models.EnforcementReport, "Enforcement report",
        derive=enforcement_report_codes,
    ),
    CollectionSpec(
        "customers", models.Customer, "Customer",
        order_by=(("last_name", False), ("first_name", False)),
        derive=customer_codes,
    ),
    CollectionSpec(
        "documents", models.Document, "Document", derive=document_codes,
    ),
    CollectionSpec(
        "invoices", models.Invoice, "Invoice", derive=invoice_codes,
    ),
    CollectionSpec(
        "payments", models.Payment, "Payment", derive=payment_codes,
    ),
    CollectionSpec(
        "pos_transactions", models.PosTransaction, "POS transaction",
        derive=pos_transaction_codes,
    ),
    CollectionSpec("risk_locations", models.RiskLocation, "Risk location"),
    CollectionSpec("risk_assessments", models.RiskAssessment, "Risk assessment"),
    CollectionSpec("mitigation_plans", models.MitigationPlan, "Mitigation plan"),
    CollectionSpec(
        "risk_events", models.RiskEvent, "Risk event",
        order_by=(("event_date", True),),
    ),
    CollectionSpec(
        "audit_schedules", models.AuditSchedule, "Audit schedule",
        order_by=(("scheduled_date", False),),
    ),
    CollectionSpec("audit_templates", models.AuditTemplate, "Audit template"),
    CollectionSpec(
        "audit_reports", models.AuditReport, "Audit report",
        derive=audit_report_codes,
    ),
    CollectionSpec(
        "audit_non_compliances", models.AuditNonCompliance, "Non-compliance",
    ),
    CollectionSpec(
        "audit_evidence", models.AuditEvidence, "Audit evidence",
        updated_field=None,
    ),
    CollectionSpec("characters", models.Character, "Character"),
    CollectionSpec("licenses", models.License, "License"),
    CollectionSpec(
        "vehicle_registrations", models.VehicleRegistration, "Vehicle registration",
    ),
)

SPECS_BY_NAME: dict[str, CollectionSpec] = {spec.name: spec for spec in COLLECTIONS}
