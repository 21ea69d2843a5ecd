"""API test fixtures - in-memory storage, seeded staff accounts, and an httpx client.

Invariants:
    - Every test gets a fresh app and a fresh MemoryStorage
    - One account per access level; `as_user(level)` returns Basic auth for it
    - PayPal is unconfigured unless a test sets app.state.paypal
    - `any_client` repeats a test on the memory and the SQLite database backend

Design Decisions:
    - ASGITransport does not run lifespan: storage comes in through
      dependency_overrides and app.state.paypal is set here directly
"""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from beavernet.api.dependencies import get_storage
from beavernet.main import create_app
from beavernet.storage.base import Storage
from beavernet.storage.database import DatabaseStorage
from beavernet.storage.memory import MemoryStorage

PASSWORD = "pw"

STAFF = {
    "SuperAdmin": "root",
    "Admin": "admin",
    "IT Web Support": "itweb",
    "911 Supervisor": "super911",
    "911 Dispatcher": "disp911",
    "User": "clerk",
}


async def _seed_staff(backend: Storage) -> Storage:
    for level, username in STAFF.items():
        await backend.users.create({
            "username": username,
            "password": PASSWORD,
            "first_name": username.capitalize(),
            "last_name": "Beaver",
            "access_level": level,
            "employee_pin": "4321" if level == "911 Dispatcher" else None,
            "chip_card_id": "CHIP-911" if level == "911 Dispatcher" else None,
            "is_active": True,
        })
    return backend


def _build_app(storage: Storage):
    application = create_app()
    application.dependency_overrides[get_storage] = lambda: storage
    application.state.paypal = None
    return application


def _client(application) -> AsyncClient:
    return AsyncClient(
        transport=ASGITransport(app=application, raise_app_exceptions=False),
        base_url="http://test",
    )


@pytest.fixture
async def storage():
    return await _seed_staff(MemoryStorage())


@pytest.fixture
def app(storage):
    return _build_app(storage)


@pytest.fixture
async def client(app):
    async with _client(app) as ac:
        yield ac


@pytest.fixture(params=["memory", "database"])
async def any_storage(request):
    if request.param == "memory":
        backend = MemoryStorage()
    else:
        backend = DatabaseStorage("sqlite+aiosqlite:///:memory:", create_tables=True)
    await backend.startup()
    yield await _seed_staff(backend)
    await backend.shutdown()


@pytest.fixture
async def any_client(any_storage):
    async with _client(_build_app(any_storage)) as ac:
        yield ac


@pytest.fixture
def as_user():
    def _auth(level: str = "SuperAdmin") -> httpx.BasicAuth:
        return httpx.BasicAuth(STAFF[level], PASSWORD)
    return _auth
