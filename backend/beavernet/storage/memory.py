"""Memory Storage - dict-backed keyed collections living for the process lifetime.

Invariants:
    - Ids come from a per-collection counter starting at 1 and are never reused
    - Unknown keys are dropped; omitted columns take the model default or None
    - Every read returns a fresh dict, so callers cannot mutate stored records
    - No locks: concurrent updates to one id are last-write-wins
"""

from beavernet.core.domain_types import StorageBackend
from beavernet.core.identifiers import fill_missing
from beavernet.db.base import utcnow
from beavernet.storage.base import Storage, next_stamp, sort_records
from beavernet.storage.registry import CollectionSpec


class MemoryCollection:
    """Keyed map for one entity, parameterized by its CollectionSpec."""

    def __init__(self, spec: CollectionSpec):
        self.spec = spec
        self._records: dict[int, dict] = {}
        self._next_id = 1

    async def create(self, data: dict) -> dict:
        record_id = self._next_id
        self._next_id += 1
        now = utcnow()

        record = self.spec.initial_values()
        record.update(
            (key, value) for key, value in data.items() if key in record
        )
        record["id"] = record_id
        for stamp in (self.spec.created_field, self.spec.updated_field):
            if stamp:
                record[stamp] = now
        if self.spec.derive:
            record.update(fill_missing(record, self.spec.derive(record_id, now, record)))

        self._records[record_id] = record
        return dict(record)

    async def get(self, record_id: int) -> dict | None:
        record = self._records.get(record_id)
        return dict(record) if record is not None else None

    async def get_all(self) -> list[dict]:
        records = [dict(r) for r in self._records.values()]
        return sort_records(records, self.spec.order_by)

    async def update(self, record_id: int, changes: dict) -> dict | None:
        current = self._records.get(record_id)
        if current is None:
            return None
        updated = dict(current)
        updated.update(
            (key, value) for key, value in changes.items()
            if key in updated and key not in self.spec.protected_fields
        )
        if self.spec.updated_field:
            updated[self.spec.updated_field] = next_stamp(current[self.spec.updated_field])
        self._records[record_id] = updated
        return dict(updated)

    async def find_by(self, **equals: object) -> list[dict]:
        matches = [
            dict(r) for r in self._records.values()
            if all(r.get(key) == value for key, value in equals.items())
        ]
        return sort_records(matches, self.spec.order_by)

    async def first_by(self, **equals: object) -> dict | None:
        matches = await self.find_by(**equals)
        return matches[0] if matches else None

    async def search(self, term: str, fields: tuple[str, ...]) -> list[dict]:
        needle = term.casefold()
        matches = [
            dict(r) for r in self._records.values()
            if any(
                r.get(key) is not None and needle in str(r[key]).casefold()
                for key in fields
            )
        ]
        return sort_records(matches, self.spec.order_by)


class MemoryStorage(Storage):
    """In-process storage. State is lost on restart."""

    backend = StorageBackend.MEMORY

    def _build_collection(self, spec: CollectionSpec) -> MemoryCollection:
        return MemoryCollection(spec)
