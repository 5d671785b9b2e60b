"""SQL Person Repository — SQLAlchemy implementation of core PersonRepository.

Invariants:
    - One instance per request, bound to the request's AsyncSession
    - Returned rows are wire dicts (camelCase, JSON-safe) built from the schemas
    - read_with_company returns 0 or 1 rows; each row has company: [] or [company]
    - A stored companyId that is not a UUID raises InvalidIdentifierError (500)
    - SQLAlchemy errors are rolled back and re-raised as DatabaseError

Design Decisions:
    - Lookup done as a second primary-key select instead of a CAST join:
      the reinterpretation of companyId happens in Python, so a malformed value
      fails loudly and identically on PostgreSQL and SQLite
    - update and delete are single UPDATE/DELETE ... RETURNING statements:
      a row removed by a concurrent request yields no row and the caller answers 404
    - count and page reads share the session (and its transaction): AsyncSession
      cannot be used from concurrent tasks
"""

import logging
from typing import Any

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from person_api.core.domain_types import PersonId, parse_company_id
from person_api.core.errors import DatabaseError, ErrorContext
from person_api.core.search_filter import LIKE_ESCAPE
from person_api.models.company import Company
from person_api.models.person import Person
from person_api.schemas.person import (
    CompanyResponse, PersonResponse, PersonWithCompany,
)

logger = logging.getLogger(__name__)


class SqlPersonRepository:
    """Person persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, fields: dict[str, Any]) -> dict:
        person = Person(**fields)
        self._db.add(person)
        await self._commit("create")
        await self._refresh(person, "create")
        return PersonResponse.model_validate(person).to_wire()

    async def read_with_company(self, person_id: PersonId) -> list[dict]:
        person = await self._get(person_id)
        if person is None:
            return []
        company_id = parse_company_id(person.company_id)
        result = await self._execute(
            select(Company).where(Company.id == company_id), "lookup",
        )
        companies = [
            CompanyResponse.model_validate(c) for c in result.scalars().all()
        ]
        joined = PersonWithCompany.model_validate(
            {**PersonResponse.model_validate(person).model_dump(),
             "company": companies},
        )
        return [joined.to_wire()]

    async def update(
        self, person_id: PersonId, changes: dict[str, Any],
    ) -> dict | None:
        if not changes:
            person = await self._get(person_id)
            return None if person is None else (
                PersonResponse.model_validate(person).to_wire()
            )
        result = await self._execute(
            update(Person)
            .where(Person.id == person_id)
            .values(**changes)
            .returning(Person)
            .execution_options(populate_existing=True),
            "update",
        )
        person = result.scalar_one_or_none()
        if person is None:
            return None
        updated = PersonResponse.model_validate(person).to_wire()
        await self._commit("update")
        return updated

    async def delete(self, person_id: PersonId) -> dict | None:
        result = await self._execute(
            delete(Person)
            .where(Person.id == person_id)
            .returning(Person)
            .execution_options(populate_existing=True),
            "delete",
        )
        person = result.scalar_one_or_none()
        if person is None:
            return None
        removed = PersonResponse.model_validate(person).to_wire()
        await self._commit("delete")
        return removed

    async def count(self) -> int:
        result = await self._execute(
            select(func.count()).select_from(Person), "count",
        )
        return result.scalar_one()

    async def list_page(self, offset: int, limit: int) -> list[dict]:
        result = await self._execute(
            select(Person)
            .order_by(Person.created.desc(), Person.id)
            .offset(offset)
            .limit(limit),
            "list",
        )
        return [
            PersonResponse.model_validate(p).to_wire()
            for p in result.scalars().all()
        ]

    async def search(
        self, pattern: str, attributes: list[str], limit: int,
    ) -> list[dict]:
        if not attributes:
            return []
        condition = or_(*(
            getattr(Person, attr).ilike(pattern, escape=LIKE_ESCAPE)
            for attr in attributes
        ))
        result = await self._execute(
            select(Person)
            .where(condition)
            .order_by(Person.name.asc(), Person.id)
            .limit(limit),
            "search",
        )
        return [
            PersonResponse.model_validate(p).to_wire()
            for p in result.scalars().all()
        ]

    # ─── helpers ────────────────────────────────────────────────

    async def _get(self, person_id: PersonId) -> Person | None:
        result = await self._execute(
            select(Person).where(Person.id == person_id), "get",
        )
        return result.scalar_one_or_none()

    async def _execute(self, statement, operation: str):
        try:
            return await self._db.execute(statement)
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"Person {operation} query failed: {e}",
                extra={"operation": operation},
            )
            raise DatabaseError(str(e), operation, ErrorContext(operation=operation))

    async def _commit(self, operation: str) -> None:
        try:
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"Person {operation} commit failed: {e}",
                extra={"operation": operation},
            )
            raise DatabaseError(str(e), operation, ErrorContext(operation=operation))

    async def _refresh(self, person: Person, operation: str) -> None:
        try:
            await self._db.refresh(person)
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"Person {operation} refresh failed: {e}",
                extra={"operation": operation},
            )
            raise DatabaseError(str(e), operation, ErrorContext(operation=operation))
