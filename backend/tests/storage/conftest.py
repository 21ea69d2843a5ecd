"""Storage test fixtures - every storage test runs against both backends.

Design Decisions:
    - SQLite in-memory for the database backend: fast, no external dependency
      (StaticPool keeps one connection so the schema survives between sessions)
"""

import pytest

from beavernet.storage.database import DatabaseStorage
from beavernet.storage.memory import MemoryStorage


@pytest.fixture(params=["memory", "database"])
async def storage(request):
    if request.param == "memory":
        backend = MemoryStorage()
    else:
        backend = DatabaseStorage("sqlite+aiosqlite:///:memory:", create_tables=True)
    await backend.startup()
    yield backend
    await backend.shutdown()
