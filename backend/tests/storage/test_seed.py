"""Startup Seed - verifies the bootstrap admin and idempotent sample data."""

from beavernet.config import Settings
from beavernet.storage.seed import SAMPLE_INCIDENTS, SAMPLE_UNITS, seed_storage


def _settings(**overrides):
    values = {
        "seed_sample_data": True,
        "bootstrap_admin_username": "admin",
        "bootstrap_admin_password": "changeme",
    }
    values.update(overrides)
    return Settings(**values)


async def test_seed_creates_admin_and_sample_data(storage):
    await seed_storage(storage, _settings())
    admin = await storage.get_user_by_username("admin")
    assert admin["access_level"] == "SuperAdmin"
    assert len(await storage.units.get_all()) == len(SAMPLE_UNITS)
    incidents = await storage.incidents.get_all()
    assert len(incidents) == len(SAMPLE_INCIDENTS)
    assert all(i["incident_number"] for i in incidents)


async def test_seed_is_idempotent(storage):
    await seed_storage(storage, _settings())
    await seed_storage(storage, _settings())
    assert len(await storage.users.get_all()) == 1
    assert len(await storage.units.get_all()) == len(SAMPLE_UNITS)


async def test_seed_without_sample_data(storage):
    await seed_storage(storage, _settings(seed_sample_data=False))
    assert await storage.units.get_all() == []


async def test_seed_without_admin_credentials(storage):
    await seed_storage(storage, _settings(
        bootstrap_admin_username=None, seed_sample_data=False,
    ))
    assert await storage.users.get_all() == []
