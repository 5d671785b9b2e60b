"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection (one per request)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - read_with_company returns a list (0..1 rows) like a lookup query would;
      callers check its length, never None
    - update/delete return None when nothing matched so routes can answer 404
"""

from typing import Any, Protocol

from person_api.core.domain_types import PersonId


class PersonRepository(Protocol):
    """Contract for person persistence — implemented by shell."""
    async def create(self, fields: dict[str, Any]) -> dict: ...
    async def read_with_company(self, person_id: PersonId) -> list[dict]: ...
    async def update(
        self, person_id: PersonId, changes: dict[str, Any],
    ) -> dict | None: ...
    async def delete(self, person_id: PersonId) -> dict | None: ...
    async def count(self) -> int: ...
    async def list_page(self, offset: int, limit: int) -> list[dict]: ...
    async def search(
        self, pattern: str, attributes: list[str], limit: int,
    ) -> list[dict]: ...
