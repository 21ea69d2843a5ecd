"""Startup Seed - bootstrap admin account and sample dispatch data.

Invariants:
    - Idempotent: the admin is created only when the username is free, sample
      data only when the units collection is empty
    - Sample incidents get their numbers from the incident deriver
"""

import logging

from beavernet.config import Settings
from beavernet.core.domain_types import AccessLevel
from beavernet.storage.base import Storage

logger = logging.getLogger(__name__)

SAMPLE_UNITS = [
    {"unit_number": "P-101", "type": "police", "status": "available", "current_location": "Downtown Station", "latitude": 45.5152, "longitude": -122.6784},
    {"unit_number": "P-102", "type": "police", "status": "responding", "current_location": "Oak Street", "latitude": 45.5165, "longitude": -122.6793},
    {"unit_number": "P-103", "type": "police", "status": "busy", "current_location": "Traffic Stop - Main St", "latitude": 45.5140, "longitude": -122.6750},
    {"unit_number": "F-201", "type": "fire", "status": "available", "current_location": "Fire Station 1", "latitude": 45.5180, "longitude": -122.6820},
    {"unit_number": "F-202", "type": "fire", "status": "available", "current_location": "Fire Station 2", "latitude": 45.5100, "longitude": -122.6700},
    {"unit_number": "A-301", "type": "ambulance", "status": "enroute", "current_location": "Hospital", "latitude": 45.5200, "longitude": -122.6850},
    {"unit_number": "A-302", "type": "ambulance", "status": "available", "current_location": "Medical Center", "latitude": 45.5120, "longitude": -122.6680},
    {"unit_number": "P-104", "type": "police", "status": "off_duty", "current_location": "Station", "latitude": 45.5152, "longitude": -122.6784},
]

SAMPLE_INCIDENTS = [
    {
        "type": "medical", "priority": "high", "status": "active",
        "address": "123 Main Street", "latitude": 45.5140, "longitude": -122.6750,
        "complainant": "John Doe", "description": "Cardiac arrest, CPR in progress",
        "people_involved": 1,
    },
    {
        "type": "fire", "priority": "high", "status": "dispatched",
        "address": "456 Oak Avenue", "latitude": 45.5165, "longitude": -122.6793,
        "complainant": "Jane Smith", "description": "Structure fire, smoke visible",
        "people_involved": 3,
    },
    {
        "type": "accident", "priority": "medium", "status": "new",
        "address": "789 Pine Road", "latitude": 45.5200, "longitude": -122.6850,
        "complainant": "Anonymous", "description": "Two vehicle collision, minor injuries",
        "people_involved": 4,
    },
]


async def seed_storage(storage: Storage, settings: Settings) -> None:
    if settings.bootstrap_admin_username and settings.bootstrap_admin_password:
        existing = await storage.get_user_by_username(settings.bootstrap_admin_username)
        if existing is None:
            await storage.users.create({
                "username": settings.bootstrap_admin_username,
                "password": settings.bootstrap_admin_password,
                "access_level": AccessLevel.SUPER_ADMIN.value,
                "is_active": True,
            })
            logger.info(
                "Bootstrap admin created",
                extra={"username": settings.bootstrap_admin_username},
            )

    if not settings.seed_sample_data:
        return
    if await storage.units.get_all():
        return
    for unit in SAMPLE_UNITS:
        await storage.units.create(unit)
    for incident in SAMPLE_INCIDENTS:
        await storage.incidents.create(incident)
    logger.info(
        f"Seeded {len(SAMPLE_UNITS)} units and {len(SAMPLE_INCIDENTS)} incidents",
    )
