"""Identity - credential checks and the per-request identity record.

Invariants:
    - Password check is exact string equality against the stored value
    - Inactive accounts never authenticate, even with the right password
    - Identity is immutable once built (frozen dataclass)
    - Pure functions: no storage access, no request objects
"""

import secrets
from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """Authenticated user attached to the request context."""
    id: int
    username: str
    name: str
    email: str | None = None
    department: str | None = None
    position: str | None = None
    access_level: str | None = None

    def to_response(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "name": self.name,
            "email": self.email,
            "department": self.department,
            "position": self.position,
            "accessLevel": self.access_level,
        }


def display_name(user: dict) -> str:
    """'First Last' when both are set, else whichever is set, else username."""
    first = user.get("first_name")
    last = user.get("last_name")
    if first and last:
        return f"{first} {last}"
    return first or last or user["username"]


def credentials_match(user: dict | None, password: str) -> bool:
    """True when the account exists, is active, and the password is equal."""
    if user is None:
        return False
    if user.get("is_active") is False:
        return False
    stored = user.get("password") or ""
    return secrets.compare_digest(stored.encode(), password.encode())


def secret_matches(stored: str | None, supplied: str) -> bool:
    """Compare a PIN or chip card id. An unset secret never matches."""
    if not stored:
        return False
    return secrets.compare_digest(stored.encode(), supplied.encode())


def build_identity(user: dict) -> Identity:
    return Identity(
        id=user["id"],
        username=user["username"],
        name=display_name(user),
        email=user.get("email"),
        department=user.get("department"),
        position=user.get("position"),
        access_level=user.get("access_level"),
    )


def new_call_session_id() -> str:
    """Session id handed to a verified 911 call taker."""
    return f"call_{secrets.token_urlsafe(18)}"
