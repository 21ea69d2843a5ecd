"""Derived Identifiers - human-readable codes composed at record creation.

Invariants:
    - Every deriver has the signature (record_id, now, data) -> dict of fields
    - Counter-based codes are unique as long as the collection counter is
    - Client-supplied codes win: fill_missing() only sets absent/None/"" fields
    - Document tokens use the secrets module; document hashes are SHA-256
      of the stored content, so they can be recomputed and compared
"""

import hashlib
import secrets
from collections.abc import Callable
from datetime import datetime

Deriver = Callable[[int, datetime, dict], dict]


def incident_codes(record_id: int, now: datetime, data: dict) -> dict:
    return {"incident_number": f"{now.year}-{record_id:03d}"}


def enforcement_report_codes(record_id: int, now: datetime, data: dict) -> dict:
    return {"report_number": f"ER-{now.year}-{record_id:06d}"}


def customer_codes(record_id: int, now: datetime, data: dict) -> dict:
    return {"customer_id": f"CUS-{record_id:05d}"}


def invoice_codes(record_id: int, now: datetime, data: dict) -> dict:
    return {"invoice_number": f"INV-{now.year}-{record_id:06d}"}


def payment_codes(record_id: int, now: datetime, data: dict) -> dict:
    return {"payment_id": f"PAY-{now.year}-{record_id:06d}"}


def pos_transaction_codes(record_id: int, now: datetime, data: dict) -> dict:
    return {
        "transaction_id": f"POS-{now.year}-{record_id:06d}",
        "receipt_number": f"RCPT-{record_id:06d}",
    }


def audit_report_codes(record_id: int, now: datetime, data: dict) -> dict:
    return {"report_number": f"AUD-{now.year}-{record_id:04d}"}


def document_codes(record_id: int, now: datetime, data: dict) -> dict:
    uid = f"UID-{now:%Y%m%d-%H%M%S}-RG{record_id:02d}"
    token = f"TK-{secrets.token_hex(6).upper()}"
    return {
        "uid": uid,
        "token": token,
        "hash": content_hash(data.get("original_pdf_data") or f"{uid}:{token}"),
    }


def content_hash(content: str) -> str:
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def fill_missing(data: dict, derived: dict) -> dict:
    """Return the derived fields the client left empty."""
    return {
        key: value for key, value in derived.items()
        if data.get(key) in (None, "")
    }
