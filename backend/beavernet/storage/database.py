"""Database Storage - SQLAlchemy-backed collections over one async engine.

Invariants:
    - One session per collection call; each call commits or rolls back alone
    - Derived codes are written after the insert flush (they need the id),
      inside the same transaction
    - Datetimes leave this module timezone-aware (SQLite returns naive UTC)
    - Unknown keys are dropped; omitted columns take the model default
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import or_, select

from beavernet.core.domain_types import StorageBackend
from beavernet.core.identifiers import fill_missing
from beavernet.db.base import Base, utcnow
from beavernet.infrastructure.database import DatabaseSessionManager
from beavernet.storage.base import Storage, next_stamp
from beavernet.storage.registry import CollectionSpec

logger = logging.getLogger(__name__)


def _as_utc(value):
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class DatabaseCollection:
    """Keyed collection for one ORM model."""

    def __init__(self, spec: CollectionSpec, manager: DatabaseSessionManager):
        self.spec = spec
        self._manager = manager
        self._model = spec.model

    def _to_record(self, row) -> dict:
        return {key: _as_utc(getattr(row, key)) for key in self.spec.columns}

    def _ordering(self) -> list:
        clauses = []
        for key, descending in self.spec.order_by:
            column = getattr(self._model, key)
            clauses.append(
                column.desc().nulls_last() if descending else column.asc().nulls_last(),
            )
        clauses.append(self._model.id.asc())
        return clauses

    async def create(self, data: dict) -> dict:
        values = {
            key: value for key, value in data.items()
            if key in self.spec.columns and key != "id"
        }
        now = utcnow()
        for stamp in (self.spec.created_field, self.spec.updated_field):
            if stamp:
                values[stamp] = now

        async with self._manager.session(self.spec.label) as db:
            row = self._model(**values)
            db.add(row)
            await db.flush()
            if self.spec.derive:
                current = self._to_record(row)
                derived = fill_missing(current, self.spec.derive(row.id, now, current))
                for key, value in derived.items():
                    setattr(row, key, value)
            await db.commit()
            return self._to_record(row)

    async def get(self, record_id: int) -> dict | None:
        async with self._manager.session(self.spec.label) as db:
            row = await db.get(self._model, record_id)
            return self._to_record(row) if row is not None else None

    async def get_all(self) -> list[dict]:
        async with self._manager.session(self.spec.label) as db:
            result = await db.execute(select(self._model).order_by(*self._ordering()))
            return [self._to_record(row) for row in result.scalars().all()]

    async def update(self, record_id: int, changes: dict) -> dict | None:
        async with self._manager.session(self.spec.label) as db:
            row = await db.get(self._model, record_id)
            if row is None:
                return None
            for key, value in changes.items():
                if key in self.spec.columns and key not in self.spec.protected_fields:
                    setattr(row, key, value)
            if self.spec.updated_field:
                previous = _as_utc(getattr(row, self.spec.updated_field))
                setattr(row, self.spec.updated_field, next_stamp(previous))
            await db.commit()
            return self._to_record(row)

    async def find_by(self, **equals: object) -> list[dict]:
        query = select(self._model).where(
            *(getattr(self._model, key) == value for key, value in equals.items()),
        ).order_by(*self._ordering())
        async with self._manager.session(self.spec.label) as db:
            result = await db.execute(query)
            return [self._to_record(row) for row in result.scalars().all()]

    async def first_by(self, **equals: object) -> dict | None:
        matches = await self.find_by(**equals)
        return matches[0] if matches else None

    async def search(self, term: str, fields: tuple[str, ...]) -> list[dict]:
        query = select(self._model).where(
            or_(*(
                getattr(self._model, key).icontains(term, autoescape=True)
                for key in fields
            )),
        ).order_by(*self._ordering())
        async with self._manager.session(self.spec.label) as db:
            result = await db.execute(query)
            return [self._to_record(row) for row in result.scalars().all()]


class DatabaseStorage(Storage):
    """Relational storage reached through SQLAlchemy's async engine."""

    backend = StorageBackend.DATABASE

    def __init__(
        self,
        database_url: str,
        pool_size: int = 20,
        max_overflow: int = 10,
        create_tables: bool = False,
    ):
        self.manager = DatabaseSessionManager(
            database_url, pool_size=pool_size, max_overflow=max_overflow,
        )
        self._create_tables = create_tables
        super().__init__()

    def _build_collection(self, spec: CollectionSpec) -> DatabaseCollection:
        return DatabaseCollection(spec, self.manager)

    async def startup(self) -> None:
        if self._create_tables:
            await self.manager.create_all(Base.metadata)
            logger.info("Database tables ensured")

    async def shutdown(self) -> None:
        await self.manager.dispose()

    async def health_check(self) -> bool:
        return await self.manager.health_check()
