"""Domain Types - identifiers and the states the workflows branch on.

Invariants:
    - RecordId wraps int: every entity id is a per-collection counter value
    - States that drive logic are Enums; free-form labels stay plain strings

Design Decisions:
    - NewType over wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# --- Identity Types ----------------------------------------------

RecordId = NewType("RecordId", int)


# --- Enums -------------------------------------------------------

class AccessLevel(str, Enum):
    """User access labels. No hierarchy: checks are exact membership."""
    SUPER_ADMIN = "SuperAdmin"
    ADMIN = "Admin"
    IT_WEB_SUPPORT = "IT Web Support"
    SUPERVISOR_911 = "911 Supervisor"
    DISPATCHER_911 = "911 Dispatcher"
    USER = "User"


class IncidentStatus(str, Enum):
    NEW = "new"
    DISPATCHED = "dispatched"
    ACTIVE = "active"
    RESOLVED = "resolved"


class UnitStatus(str, Enum):
    AVAILABLE = "available"
    DISPATCHED = "dispatched"
    RESPONDING = "responding"
    ENROUTE = "enroute"
    BUSY = "busy"
    OFF_DUTY = "off_duty"


class AssignmentStatus(str, Enum):
    """IncidentUnit lifecycle."""
    ASSIGNED = "assigned"
    ENROUTE = "enroute"
    ARRIVED = "arrived"
    COMPLETED = "completed"


class StorageBackend(str, Enum):
    MEMORY = "memory"
    DATABASE = "database"
