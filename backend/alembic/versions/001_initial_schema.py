"""Initial schema - every BeaverNet service table.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id():
    return sa.Column("id", sa.Integer, primary_key=True, autoincrement=True)


def _created_at():
    return sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())


def _updated_at():
    return sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())


def _ts(name: str, nullable: bool = True):
    return sa.Column(name, sa.DateTime(timezone=True), nullable=nullable)


def upgrade() -> None:
    op.create_table(
        "users",
        _id(),
        sa.Column("username", sa.String(100), nullable=False, unique=True),
        sa.Column("password", sa.Text, nullable=False),
        sa.Column("first_name", sa.String(100)),
        sa.Column("last_name", sa.String(100)),
        sa.Column("email", sa.String(255)),
        sa.Column("department", sa.String(100)),
        sa.Column("position", sa.String(100)),
        sa.Column("phone", sa.String(50)),
        sa.Column("avatar", sa.Text),
        sa.Column("access_level", sa.String(50), nullable=False, server_default="User"),
        sa.Column("employee_pin", sa.String(20)),
        sa.Column("chip_card_id", sa.String(100)),
        sa.Column("is_active", sa.Boolean, server_default=sa.true()),
        _created_at(), _updated_at(),
    )

    # --- Dispatch ---------------------------------------------------
    op.create_table(
        "incidents",
        _id(),
        sa.Column("incident_number", sa.String(50), unique=True),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("priority", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="new"),
        sa.Column("address", sa.Text, nullable=False),
        sa.Column("latitude", sa.Float),
        sa.Column("longitude", sa.Float),
        sa.Column("complainant", sa.Text),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("people_involved", sa.Integer, server_default="0"),
        sa.Column("call_back_phone", sa.String(50)),
        sa.Column("landline_detection", sa.Boolean, server_default=sa.false()),
        sa.Column("location_phone", sa.String(50)),
        sa.Column("caller_name", sa.Text),
        sa.Column("called_from", sa.Text),
        sa.Column("nature_of_problem", sa.Text),
        sa.Column("problem_code", sa.String(20)),
        sa.Column("map_page", sa.String(50)),
        sa.Column("city", sa.String(100)),
        sa.Column("cross_street", sa.Text),
        sa.Column("comments", sa.Text),
        sa.Column("with_patient_now", sa.Boolean),
        sa.Column("number_hurt_sick", sa.Integer),
        sa.Column("patient_age", sa.String(50)),
        sa.Column("patient_gender", sa.String(20)),
        sa.Column("breathing_status", sa.String(30)),
        sa.Column("chief_complaint_code", sa.String(50)),
        sa.Column("pregnancy_complications", sa.String(50)),
        sa.Column("pregnancy_weeks", sa.String(50)),
        sa.Column("baby_visible", sa.String(50)),
        _created_at(), _updated_at(),
    )

    op.create_table(
        "units",
        _id(),
        sa.Column("unit_number", sa.String(50), nullable=False, unique=True),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="available"),
        sa.Column("current_location", sa.Text),
        sa.Column("latitude", sa.Float),
        sa.Column("longitude", sa.Float),
        sa.Column("assigned_incident_id", sa.Integer),
        _updated_at(),
    )

    op.create_table(
        "incident_units",
        _id(),
        sa.Column("incident_id", sa.Integer, nullable=False, index=True),
        sa.Column("unit_id", sa.Integer, nullable=False, index=True),
        sa.Column("assigned_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("status", sa.String(20), nullable=False, server_default="assigned"),
    )

    op.create_table(
        "call_entry_logs",
        _id(),
        sa.Column("incident_id", sa.Integer, index=True),
        sa.Column("call_taker_id", sa.Integer),
        sa.Column("call_taker_name", sa.Text, nullable=False),
        sa.Column("auth_method", sa.String(20), nullable=False),
        _ts("entry_time"),
        sa.Column("session_id", sa.String(100), nullable=False),
        sa.Column("ip_address", sa.String(64)),
        sa.Column("user_agent", sa.Text),
        _created_at(),
    )

    # --- Animal control ---------------------------------------------
    op.create_table(
        "animals",
        _id(),
        sa.Column("name", sa.String(100)),
        sa.Column("species", sa.String(50), nullable=False),
        sa.Column("breed", sa.String(100)),
        sa.Column("color", sa.String(100)),
        sa.Column("age", sa.String(50)),
        sa.Column("gender", sa.String(20)),
        sa.Column("size", sa.String(20)),
        sa.Column("health_status", sa.String(20), nullable=False),
        sa.Column("health_notes", sa.Text),
        sa.Column("found_location", sa.Text),
        _ts("found_date"),
        sa.Column("surrender_location", sa.Text),
        _ts("surrender_date"),
        sa.Column("surrender_reason", sa.Text),
        sa.Column("is_wild", sa.Boolean, server_default=sa.false()),
        sa.Column("is_stray", sa.Boolean, server_default=sa.false()),
        sa.Column("has_owner", sa.Boolean, server_default=sa.false()),
        sa.Column("owner_name", sa.Text),
        sa.Column("owner_phone", sa.String(50)),
        sa.Column("owner_address", sa.Text),
        sa.Column("owner_email", sa.String(255)),
        sa.Column("microchip_number", sa.String(100)),
        sa.Column("registration_number", sa.String(100), unique=True),
        sa.Column("notes", sa.Text),
        _created_at(), _updated_at(),
    )

    op.create_table(
        "enforcement_reports",
        _id(),
        sa.Column("report_number", sa.String(50), unique=True),
        sa.Column("type", sa.String(30), nullable=False),
        sa.Column("violation_type", sa.String(100), nullable=False),
        sa.Column("location", sa.Text, nullable=False),
        _ts("date", nullable=False),
        sa.Column("officer_name", sa.Text, nullable=False),
        sa.Column("violator_name", sa.Text),
        sa.Column("violator_address", sa.Text),
        sa.Column("violator_phone", sa.String(50)),
        sa.Column("animal_id", sa.Integer, index=True),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("fine_amount", sa.Float),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        _ts("due_date"),
        _created_at(), _updated_at(),
    )

    # --- CRM and documents ------------------------------------------
    op.create_table(
        "customers",
        _id(),
        sa.Column("customer_id", sa.String(50), unique=True),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("phonetic_name", sa.String(200)),
        sa.Column("nickname", sa.String(100)),
        _ts("date_of_birth"),
        sa.Column("home_phone", sa.String(50)),
        sa.Column("work_phone", sa.String(50)),
        sa.Column("work_extension", sa.String(20)),
        sa.Column("email", sa.String(255)),
        sa.Column("address", sa.Text),
        sa.Column("city", sa.String(100)),
        sa.Column("state", sa.String(50)),
        sa.Column("zip_code", sa.String(20)),
        sa.Column("group", sa.String(100)),
        sa.Column("professional_info", sa.Text),
        sa.Column("professional_license_number", sa.String(100)),
        sa.Column("driver_license_number", sa.String(100)),
        sa.Column("notes", sa.Text),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        _created_at(), _updated_at(),
    )

    op.create_table(
        "documents",
        _id(),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("uid", sa.String(100), unique=True),
        sa.Column("token", sa.String(100)),
        sa.Column("hash", sa.String(128)),
        sa.Column("status", sa.String(20), nullable=False, server_default="Processed"),
        sa.Column("author", sa.Text, nullable=False),
        sa.Column("original_file_name", sa.Text, nullable=False),
        sa.Column("original_pdf_data", sa.Text),
        _created_at(), _updated_at(),
    )

    # --- Payments ---------------------------------------------------
    op.create_table(
        "invoices",
        _id(),
        sa.Column("invoice_number", sa.String(50), unique=True),
        sa.Column("customer_id", sa.Integer, index=True),
        sa.Column("customer_name", sa.Text, nullable=False),
        sa.Column("customer_email", sa.String(255)),
        sa.Column("customer_address", sa.Text),
        sa.Column("amount", sa.Float, nullable=False),
        sa.Column("currency", sa.String(10), nullable=False, server_default="USD"),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        _ts("due_date"),
        sa.Column("description", sa.Text),
        sa.Column("items", sa.Text),
        sa.Column("tax_amount", sa.Float, server_default="0"),
        sa.Column("discount_amount", sa.Float, server_default="0"),
        sa.Column("total_amount", sa.Float, nullable=False),
        sa.Column("payment_method", sa.String(20)),
        sa.Column("paypal_order_id", sa.String(100)),
        _ts("paid_at"),
        _created_at(), _updated_at(),
    )

    op.create_table(
        "payments",
        _id(),
        sa.Column("payment_id", sa.String(50), unique=True),
        sa.Column("invoice_id", sa.Integer, index=True),
        sa.Column("amount", sa.Float, nullable=False),
        sa.Column("currency", sa.String(10), nullable=False, server_default="USD"),
        sa.Column("payment_method", sa.String(20), nullable=False),
        sa.Column("payment_status", sa.String(20), nullable=False),
        sa.Column("transaction_id", sa.String(100)),
        sa.Column("paypal_order_id", sa.String(100)),
        sa.Column("google_pay_token", sa.Text),
        sa.Column("customer_name", sa.Text),
        sa.Column("customer_email", sa.String(255)),
        sa.Column("description", sa.Text),
        sa.Column("receipt_url", sa.Text),
        _created_at(), _updated_at(),
    )

    op.create_table(
        "pos_transactions",
        _id(),
        sa.Column("transaction_id", sa.String(50), unique=True),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("amount", sa.Float, nullable=False),
        sa.Column("currency", sa.String(10), nullable=False, server_default="USD"),
        sa.Column("payment_method", sa.String(20), nullable=False),
        sa.Column("customer_name", sa.Text),
        sa.Column("customer_email", sa.String(255)),
        sa.Column("items", sa.Text),
        sa.Column("tax_amount", sa.Float, server_default="0"),
        sa.Column("discount_amount", sa.Float, server_default="0"),
        sa.Column("total_amount", sa.Float, nullable=False),
        sa.Column("payment_status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("transaction_reference", sa.String(100)),
        sa.Column("receipt_number", sa.String(50)),
        sa.Column("employee_id", sa.String(50)),
        _created_at(), _updated_at(),
    )

    # --- Risk -------------------------------------------------------
    op.create_table(
        "risk_locations",
        _id(),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("address", sa.Text, nullable=False),
        sa.Column("latitude", sa.Float, nullable=False),
        sa.Column("longitude", sa.Float, nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("capacity", sa.Integer),
        sa.Column("contact_info", sa.Text),
        sa.Column("operating_hours", sa.Text),
        _created_at(), _updated_at(),
    )

    op.create_table(
        "risk_assessments",
        _id(),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("risk_type", sa.String(50), nullable=False),
        sa.Column("location_id", sa.Integer, index=True),
        sa.Column("severity_score", sa.Integer, nullable=False, server_default="1"),
        sa.Column("probability_score", sa.Integer, nullable=False, server_default="1"),
        sa.Column("human_impact", sa.Integer, nullable=False, server_default="1"),
        sa.Column("economic_impact", sa.Integer, nullable=False, server_default="1"),
        sa.Column("environmental_impact", sa.Integer, nullable=False, server_default="1"),
        sa.Column("risk_level", sa.String(20), nullable=False, server_default="low"),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("affected_population", sa.Integer, server_default="0"),
        sa.Column("estimated_damages", sa.Float, server_default="0"),
        _ts("last_review_date"),
        _ts("next_review_date"),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        _created_at(), _updated_at(),
    )

    op.create_table(
        "mitigation_plans",
        _id(),
        sa.Column("risk_assessment_id", sa.Integer, nullable=False, index=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("responsible_department", sa.Text),
        sa.Column("estimated_cost", sa.Float, server_default="0"),
        sa.Column("timeline", sa.String(20)),
        sa.Column("priority", sa.String(20), nullable=False, server_default="medium"),
        sa.Column("status", sa.String(20), nullable=False, server_default="planned"),
        _ts("start_date"),
        _ts("target_completion_date"),
        _ts("actual_completion_date"),
        sa.Column("resources", sa.Text),
        sa.Column("success_metrics", sa.Text),
        sa.Column("notes", sa.Text),
        _created_at(), _updated_at(),
    )

    op.create_table(
        "risk_events",
        _id(),
        sa.Column("risk_assessment_id", sa.Integer, nullable=False, index=True),
        _ts("event_date", nullable=False),
        sa.Column("event_type", sa.String(20), nullable=False),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("severity", sa.String(20), nullable=False, server_default="low"),
        sa.Column("actual_impact", sa.Text),
        sa.Column("response_time_minutes", sa.Integer),
        sa.Column("resources_used", sa.Text),
        sa.Column("lessons_learned", sa.Text),
        sa.Column("follow_up_actions", sa.Text),
        _created_at(), _updated_at(),
    )

    # --- Audit ------------------------------------------------------
    op.create_table(
        "audit_schedules",
        _id(),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("audit_type", sa.String(20), nullable=False),
        sa.Column("facility_type", sa.String(50), nullable=False),
        sa.Column("mission_type", sa.String(50), nullable=False),
        sa.Column("standards_framework", sa.String(50), nullable=False),
        sa.Column("inspector_id", sa.String(50), nullable=False),
        sa.Column("inspector_name", sa.Text, nullable=False),
        sa.Column("location", sa.Text, nullable=False),
        _ts("scheduled_date", nullable=False),
        sa.Column("frequency", sa.String(20)),
        sa.Column("status", sa.String(20), nullable=False, server_default="scheduled"),
        _created_at(), _updated_at(),
    )

    op.create_table(
        "audit_templates",
        _id(),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("facility_type", sa.String(50), nullable=False),
        sa.Column("mission_type", sa.String(50), nullable=False),
        sa.Column("standards_framework", sa.String(50), nullable=False),
        sa.Column("questions", sa.Text),
        _created_at(), _updated_at(),
    )

    op.create_table(
        "audit_reports",
        _id(),
        sa.Column("schedule_id", sa.Integer, nullable=False, index=True),
        sa.Column("report_number", sa.String(50), unique=True),
        _ts("audit_date", nullable=False),
        sa.Column("inspector_id", sa.String(50), nullable=False),
        sa.Column("inspector_name", sa.Text, nullable=False),
        sa.Column("location", sa.Text, nullable=False),
        sa.Column("facility_type", sa.String(50), nullable=False),
        sa.Column("mission_type", sa.String(50), nullable=False),
        sa.Column("standards_framework", sa.String(50), nullable=False),
        sa.Column("overall_score", sa.Float, server_default="0"),
        sa.Column("total_items", sa.Integer, server_default="0"),
        sa.Column("compliant_items", sa.Integer, server_default="0"),
        sa.Column("non_compliant_items", sa.Integer, server_default="0"),
        sa.Column("critical_issues", sa.Integer, server_default="0"),
        sa.Column("responses", sa.Text),
        sa.Column("digital_signature", sa.Text),
        _ts("signed_at"),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        _created_at(), _updated_at(),
    )

    op.create_table(
        "audit_non_compliances",
        _id(),
        sa.Column("audit_report_id", sa.Integer, nullable=False, index=True),
        sa.Column("item_number", sa.String(50), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("severity", sa.String(20), nullable=False),
        sa.Column("category", sa.String(50)),
        sa.Column("standard_reference", sa.Text),
        sa.Column("corrective_action", sa.Text),
        sa.Column("assigned_to", sa.String(50)),
        sa.Column("assigned_to_name", sa.Text),
        _ts("due_date"),
        sa.Column("priority", sa.String(20), nullable=False, server_default="medium"),
        sa.Column("status", sa.String(20), nullable=False, server_default="open"),
        _ts("resolved_at"),
        sa.Column("resolution_notes", sa.Text),
        sa.Column("evidence", sa.Text),
        _created_at(), _updated_at(),
    )

    op.create_table(
        "audit_evidence",
        _id(),
        sa.Column("audit_report_id", sa.Integer, nullable=False, index=True),
        sa.Column("non_compliance_id", sa.Integer, index=True),
        sa.Column("file_name", sa.Text, nullable=False),
        sa.Column("file_type", sa.String(20), nullable=False),
        sa.Column("file_size", sa.Integer),
        sa.Column("file_data", sa.Text),
        sa.Column("gps_latitude", sa.Float),
        sa.Column("gps_longitude", sa.Float),
        sa.Column("timestamp", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("description", sa.Text),
        sa.Column("uploaded_by", sa.Text, nullable=False),
        _created_at(),
    )

    # --- DMV --------------------------------------------------------
    op.create_table(
        "characters",
        _id(),
        sa.Column("sync_id", sa.String(100), unique=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        _ts("date_of_birth"),
        sa.Column("address", sa.Text),
        sa.Column("city", sa.String(100)),
        sa.Column("province", sa.String(50)),
        sa.Column("postal_code", sa.String(20)),
        sa.Column("phone", sa.String(50)),
        sa.Column("email", sa.String(255)),
        sa.Column("emergency_contact", sa.Text),
        sa.Column("emergency_phone", sa.String(50)),
        _created_at(), _updated_at(),
    )

    op.create_table(
        "licenses",
        _id(),
        sa.Column("sync_id", sa.String(100), unique=True),
        sa.Column("owner", sa.Text, nullable=False),
        sa.Column("character_id", sa.Integer, index=True),
        sa.Column("type", sa.String(20), nullable=False, server_default="DRIVERS"),
        sa.Column("license_number", sa.String(50), nullable=False, unique=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="ACTIVE"),
        _ts("expiration", nullable=False),
        sa.Column("restrictions", sa.Text),
        sa.Column("endorsements", sa.Text),
        sa.Column("issue_date", sa.DateTime(timezone=True), server_default=sa.func.now()),
        _created_at(), _updated_at(),
    )

    op.create_table(
        "vehicle_registrations",
        _id(),
        sa.Column("sync_id", sa.String(100), unique=True),
        sa.Column("owner", sa.Text, nullable=False),
        sa.Column("character_id", sa.Integer, index=True),
        sa.Column("vehicle_type", sa.String(30), nullable=False),
        sa.Column("make", sa.String(100), nullable=False),
        sa.Column("model", sa.String(100), nullable=False),
        sa.Column("year", sa.String(10), nullable=False),
        sa.Column("color", sa.String(50), nullable=False),
        sa.Column("plate", sa.String(20), nullable=False, unique=True),
        sa.Column("vin", sa.String(50), unique=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="ACTIVE"),
        _ts("expiration", nullable=False),
        sa.Column("registration_number", sa.String(50), unique=True),
        sa.Column("insurance_company", sa.Text),
        sa.Column("insurance_policy", sa.String(100)),
        _ts("insurance_expiration"),
        _created_at(), _updated_at(),
    )


def downgrade() -> None:
    for table in (
        "vehicle_registrations", "licenses", "characters",
        "audit_evidence", "audit_non_compliances", "audit_reports",
        "audit_templates", "audit_schedules",
        "risk_events", "mitigation_plans", "risk_assessments", "risk_locations",
        "pos_transactions", "payments", "invoices",
        "documents", "customers",
        "enforcement_reports", "animals",
        "call_entry_logs", "incident_units", "units", "incidents",
        "users",
    ):
        op.drop_table(table)
