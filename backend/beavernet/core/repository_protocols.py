"""Boundary Protocols - the generic keyed-collection contract storage backends fulfil.

Invariants:
    - Records cross the boundary as plain dicts with snake_case keys
    - create() assigns id and timestamps; callers never choose them
    - get()/update() return None for unknown ids; update() then mutates nothing
    - Returned dicts are copies: mutating them never changes stored state
    - find_by() is equality on every given field; search() is a case-insensitive
      substring match on any of the given fields

Design Decisions:
    - Protocol over ABC: memory and database collections share no base class
    - Async in Protocol: the database implementation does IO per call
"""

from typing import Protocol


class EntityRepository(Protocol):
    """Contract for one entity collection - implemented by storage/."""
    async def create(self, data: dict) -> dict: ...
    async def get(self, record_id: int) -> dict | None: ...
    async def get_all(self) -> list[dict]: ...
    async def update(self, record_id: int, changes: dict) -> dict | None: ...
    async def find_by(self, **equals: object) -> list[dict]: ...
    async def first_by(self, **equals: object) -> dict | None: ...
    async def search(self, term: str, fields: tuple[str, ...]) -> list[dict]: ...
