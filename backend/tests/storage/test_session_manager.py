"""Database Session Manager - verifies error translation and rollback."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from beavernet.core.errors import (
    ConstraintViolationError, DatabaseError, DuplicateRecordError,
)
from beavernet.infrastructure.database import DatabaseSessionManager, translate_error


class _PgError(Exception):
    def __init__(self, sqlstate):
        super().__init__(f"sqlstate {sqlstate}")
        self.sqlstate = sqlstate


def test_unique_violation_becomes_duplicate():
    orig = Exception("UNIQUE constraint failed: units.unit_number")
    err = translate_error(IntegrityError("INSERT", {}, orig), "Unit")
    assert isinstance(err, DuplicateRecordError)
    assert err.http_status == 409


def test_not_null_violation_becomes_constraint_error():
    orig = Exception("NOT NULL constraint failed: incidents.type")
    err = translate_error(IntegrityError("UPDATE", {}, orig), "Incident")
    assert isinstance(err, ConstraintViolationError)
    assert err.http_status == 400
    assert err.code == "CONSTRAINT_VIOLATION"


def test_postgres_sqlstate_decides():
    unique = translate_error(IntegrityError("INSERT", {}, _PgError("23505")), "Unit")
    not_null = translate_error(IntegrityError("INSERT", {}, _PgError("23502")), "Unit")
    assert isinstance(unique, DuplicateRecordError)
    assert isinstance(not_null, ConstraintViolationError)


def test_operational_error_becomes_database_error():
    err = translate_error(OperationalError("SELECT", {}, Exception("gone")), "Unit")
    assert isinstance(err, DatabaseError)
    assert err.http_status == 503
    assert err.operation == "execute"


def test_generic_error_becomes_database_error():
    err = translate_error(SQLAlchemyError("boom"), "Unit")
    assert isinstance(err, DatabaseError)
    assert err.operation == "unknown"


async def test_session_raises_domain_error():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    with pytest.raises(DatabaseError):
        async with manager.session("Unit") as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert await manager.health_check() is True
    await manager.dispose()
