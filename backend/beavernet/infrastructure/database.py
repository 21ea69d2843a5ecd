"""Database Session Manager - async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Server databases use a pre-pinged pool; SQLite gets no pool sizing
    - Unique violations map to DuplicateRecordError (409), other integrity
      violations to ConstraintViolationError (400), everything else
      SQLAlchemy raises maps to DatabaseError (core/errors.py)

Design Decisions:
    - Owned by DatabaseStorage, created at startup: no module-level engine
    - expire_on_commit=False: records are read after commit without lazy loads
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from beavernet.core.errors import (
    BeaverNetError, ConstraintViolationError, DatabaseError, DuplicateRecordError,
)

logger = logging.getLogger(__name__)

# PostgreSQL unique_violation; SQLite only reports it in the message
_UNIQUE_SQLSTATE = "23505"

# Most specific first: IntegrityError and OperationalError are DBAPIErrors
_FAILURES: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
    (SQLAlchemyError, "Database operation failed", "unknown"),
)


def _engine_options(database_url: str, pool_size: int, max_overflow: int) -> dict:
    if database_url.startswith("sqlite"):
        if ":memory:" in database_url or database_url.endswith("://"):
            return {"poolclass": StaticPool}
        return {}
    return {
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate:
        return sqlstate == _UNIQUE_SQLSTATE
    return "UNIQUE constraint failed" in str(orig)


def translate_error(exc: SQLAlchemyError, resource: str) -> BeaverNetError:
    """Map a SQLAlchemy failure onto the BeaverNet error hierarchy."""
    if isinstance(exc, IntegrityError):
        logger.warning(f"DB integrity error on {resource}: {exc}")
        if _is_unique_violation(exc):
            return DuplicateRecordError(resource)
        return ConstraintViolationError(resource)
    for kind, message, operation in _FAILURES:
        if isinstance(exc, kind):
            logger.error(f"DB {operation} failed on {resource}: {exc}")
            return DatabaseError(message, operation)
    raise TypeError(f"Not a SQLAlchemy error: {exc!r}")


class DatabaseSessionManager:
    """Async sessions over one engine, with rollback and error translation."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url, **_engine_options(database_url, pool_size, max_overflow),
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self, resource: str = "record") -> AsyncGenerator[AsyncSession, None]:
        """Provide a session; SQLAlchemy failures roll back and surface as domain errors."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            raise translate_error(e, resource) from e
        finally:
            await session.close()

    async def create_all(self, metadata) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except BeaverNetError as e:
            logger.error(f"DB health check failed: {e}")
            return False
        except OSError as e:
            logger.error(f"DB unreachable during health check: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()
