"""Storage Interface - named entity collections plus the per-entity finders.

Invariants:
    - One attribute per CollectionSpec in COLLECTIONS, built by the backend
    - Finders are written once against EntityRepository, so both backends
      answer them identically
    - updated_at strictly increases per record, even within one clock tick
    - No delete operation exists on any collection

Design Decisions:
    - Backends differ only in _build_collection() and lifecycle hooks
    - Storage is constructed at startup and injected; no module-level instance
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta

from beavernet.core.domain_types import StorageBackend
from beavernet.core.repository_protocols import EntityRepository
from beavernet.db.base import utcnow
from beavernet.storage.registry import COLLECTIONS, SPECS_BY_NAME, CollectionSpec

CUSTOMER_SEARCH_FIELDS = (
    "customer_id", "first_name", "last_name", "nickname", "email",
    "home_phone", "work_phone", "driver_license_number",
)


def next_stamp(previous: datetime | None) -> datetime:
    """Current UTC time, nudged forward when it would not advance past previous."""
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


def sort_records(records: list[dict], order_by: tuple[tuple[str, bool], ...]) -> list[dict]:
    """Stable multi-key sort with missing values last, ties in insertion order."""
    for key, descending in reversed(order_by):
        present = [r for r in records if r.get(key) is not None]
        missing = [r for r in records if r.get(key) is None]
        present.sort(key=lambda r: r[key], reverse=descending)
        records = present + missing
    return records


class Storage(ABC):
    """Repository object exposing every entity collection."""

    backend: StorageBackend

    users: EntityRepository
    incidents: EntityRepository
    units: EntityRepository
    incident_units: EntityRepository
    call_entry_logs: EntityRepository
    animals: EntityRepository
    enforcement_reports: EntityRepository
    customers: EntityRepository
    documents: EntityRepository
    invoices: EntityRepository
    payments: EntityRepository
    pos_transactions: EntityRepository
    risk_locations: EntityRepository
    risk_assessments: EntityRepository
    mitigation_plans: EntityRepository
    risk_events: EntityRepository
    audit_schedules: EntityRepository
    audit_templates: EntityRepository
    audit_reports: EntityRepository
    audit_non_compliances: EntityRepository
    audit_evidence: EntityRepository
    characters: EntityRepository
    licenses: EntityRepository
    vehicle_registrations: EntityRepository

    def __init__(self):
        for spec in COLLECTIONS:
            setattr(self, spec.name, self._build_collection(spec))

    @abstractmethod
    def _build_collection(self, spec: CollectionSpec) -> EntityRepository:
        """Create the backend-specific collection for one entity."""

    def collection(self, name: str) -> EntityRepository:
        if name not in SPECS_BY_NAME:
            raise KeyError(f"Unknown collection: {name}")
        return getattr(self, name)

    async def startup(self) -> None:
        pass

    async def shutdown(self) -> None:
        pass

    async def health_check(self) -> bool:
        return True

    # --- Users ---------------------------------------------------

    async def get_user_by_username(self, username: str) -> dict | None:
        return await self.users.first_by(username=username)

    async def get_user_by_chip_card(self, chip_card_id: str) -> dict | None:
        return await self.users.first_by(chip_card_id=chip_card_id)

    # --- Dispatch ------------------------------------------------

    async def get_incident_units(self, incident_id: int) -> list[dict]:
        return await self.incident_units.find_by(incident_id=incident_id)

    async def get_unit_assignments(self, unit_id: int) -> list[dict]:
        return await self.incident_units.find_by(unit_id=unit_id)

    async def get_units_for_incident(self, incident_id: int) -> list[dict]:
        return await self.units.find_by(assigned_incident_id=incident_id)

    async def get_call_entry_logs_for_incident(self, incident_id: int) -> list[dict]:
        return await self.call_entry_logs.find_by(incident_id=incident_id)

    # --- Animal control ------------------------------------------

    async def find_animals_by_owner(self, owner_name: str) -> list[dict]:
        return await self.animals.search(owner_name, ("owner_name",))

    async def get_enforcement_reports_for_animal(self, animal_id: int) -> list[dict]:
        return await self.enforcement_reports.find_by(animal_id=animal_id)

    # --- CRM and payments ----------------------------------------

    async def search_customers(self, query: str) -> list[dict]:
        return await self.customers.search(query, CUSTOMER_SEARCH_FIELDS)

    async def get_invoices_for_customer(self, customer_id: int) -> list[dict]:
        return await self.invoices.find_by(customer_id=customer_id)

    async def get_payments_for_invoice(self, invoice_id: int) -> list[dict]:
        return await self.payments.find_by(invoice_id=invoice_id)

    # --- Risk ----------------------------------------------------

    async def get_assessments_for_location(self, location_id: int) -> list[dict]:
        return await self.risk_assessments.find_by(location_id=location_id)

    async def get_mitigation_plans(self, risk_assessment_id: int) -> list[dict]:
        return await self.mitigation_plans.find_by(risk_assessment_id=risk_assessment_id)

    async def get_risk_events(self, risk_assessment_id: int) -> list[dict]:
        return await self.risk_events.find_by(risk_assessment_id=risk_assessment_id)

    # --- Audit ---------------------------------------------------

    async def get_audit_reports_for_schedule(self, schedule_id: int) -> list[dict]:
        return await self.audit_reports.find_by(schedule_id=schedule_id)

    async def get_non_compliances(self, audit_report_id: int) -> list[dict]:
        return await self.audit_non_compliances.find_by(audit_report_id=audit_report_id)

    async def get_audit_evidence(self, audit_report_id: int) -> list[dict]:
        return await self.audit_evidence.find_by(audit_report_id=audit_report_id)

    # --- DMV -----------------------------------------------------

    async def get_character_by_sync_id(self, sync_id: str) -> dict | None:
        return await self.characters.first_by(sync_id=sync_id)

    async def get_license_by_number(self, license_number: str) -> dict | None:
        return await self.licenses.first_by(license_number=license_number)

    async def get_licenses_for_character(self, character_id: int) -> list[dict]:
        return await self.licenses.find_by(character_id=character_id)

    async def get_vehicles_for_character(self, character_id: int) -> list[dict]:
        return await self.vehicle_registrations.find_by(character_id=character_id)

    async def get_vehicle_by_plate(self, plate: str) -> dict | None:
        return await self.vehicle_registrations.first_by(plate=plate)

    async def get_vehicle_by_vin(self, vin: str) -> dict | None:
        return await self.vehicle_registrations.first_by(vin=vin)
