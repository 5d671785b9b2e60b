"""Person Routes — create, read, update, delete, list and search people.

Invariants:
    - Every response is the {success, result, message} envelope (+ pagination on list)
    - Body validation failures never reach a handler (RequestValidationError → 400)
    - Malformed path ids raise InvalidIdentifierError → 500
    - Blank search queries return 202 without touching the database
    - List: 200 when the collection has documents, 203 when it is empty

Design Decisions:
    - Repository injected per request (Depends) instead of a module-level client
    - page/items taken as raw strings: core/pagination.py owns defaults and clamping
    - /search registered before /{person_id} so it is not captured as an id
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from person_api.config import Settings, get_settings
from person_api.core.domain_types import EnvelopeMessage, parse_person_id
from person_api.core.errors import ErrorContext, ResourceNotFoundError
from person_api.core.pagination import resolve_page_window, total_pages
from person_api.core.repository_protocols import PersonRepository
from person_api.core.search_filter import (
    contains_pattern, is_blank_query, parse_search_fields,
    resolve_search_attributes,
)
from person_api.infrastructure.database import get_db
from person_api.schemas.envelope import Pagination, envelope_response
from person_api.schemas.person import PersonCreate, PersonUpdate
from person_api.services.person_repository import SqlPersonRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/people", tags=["people"])


def get_person_repository(
    db: AsyncSession = Depends(get_db),
) -> PersonRepository:
    return SqlPersonRepository(db)


def _not_found(person_id: str, operation: str) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        person_id, ErrorContext(person_id=person_id, operation=operation),
    )


@router.post("")
async def create_person(
    body: PersonCreate,
    repo: PersonRepository = Depends(get_person_repository),
):
    """Create a person."""
    person = await repo.create(body.model_dump())
    logger.info(
        f"Person created: {person['id']}",
        extra={"person_id": person["id"], "operation": "create"},
    )
    return envelope_response(
        status.HTTP_200_OK, True, person, EnvelopeMessage.CREATED.value,
    )


@router.get("/search")
async def search_people(
    q: str | None = Query(None),
    fields: str | None = Query(None),
    repo: PersonRepository = Depends(get_person_repository),
    settings: Settings = Depends(get_settings),
):
    """Case-insensitive substring search over the requested fields."""
    if is_blank_query(q):
        return envelope_response(
            status.HTTP_202_ACCEPTED, False, [], EnvelopeMessage.NO_MATCH.value,
        )
    attributes = resolve_search_attributes(parse_search_fields(fields))
    results = await repo.search(
        contains_pattern(q), attributes, settings.search_limit,
    )
    if not results:
        return envelope_response(
            status.HTTP_202_ACCEPTED, False, [], EnvelopeMessage.NO_MATCH.value,
        )
    return envelope_response(
        status.HTTP_200_OK, True, results, EnvelopeMessage.FOUND_ALL.value,
    )


@router.get("")
async def list_people(
    page: str | None = Query(None),
    items: str | None = Query(None),
    repo: PersonRepository = Depends(get_person_repository),
    settings: Settings = Depends(get_settings),
):
    """List people, newest first, with pagination metadata."""
    window = resolve_page_window(
        page, items,
        default_limit=settings.default_page_size,
        max_limit=settings.max_page_size,
    )
    count = await repo.count()
    results = await repo.list_page(window.offset, window.limit)
    pagination = Pagination(
        page=window.page, pages=total_pages(count, window.limit), count=count,
    )
    if count > 0:
        return envelope_response(
            status.HTTP_200_OK, True, results,
            EnvelopeMessage.FOUND_ALL.value, pagination,
        )
    return envelope_response(
        status.HTTP_203_NON_AUTHORITATIVE_INFORMATION, False, [],
        EnvelopeMessage.COLLECTION_EMPTY.value, pagination,
    )


@router.get("/{person_id}")
async def read_person(
    person_id: str,
    repo: PersonRepository = Depends(get_person_repository),
    settings: Settings = Depends(get_settings),
):
    """Read one person joined with its company (company is a 0..1 list)."""
    result = await repo.read_with_company(parse_person_id(person_id))
    if not result and settings.read_empty_as_not_found:
        raise _not_found(person_id, "read")
    return envelope_response(
        status.HTTP_200_OK, True, result,
        EnvelopeMessage.found_by_id(person_id),
    )


@router.patch("/{person_id}")
async def update_person(
    person_id: str,
    body: PersonUpdate,
    repo: PersonRepository = Depends(get_person_repository),
):
    """Merge the supplied fields into an existing person."""
    person = await repo.update(parse_person_id(person_id), body.changes())
    if person is None:
        raise _not_found(person_id, "update")
    logger.info(
        f"Person updated: {person_id}",
        extra={"person_id": person_id, "operation": "update"},
    )
    return envelope_response(
        status.HTTP_200_OK, True, person,
        EnvelopeMessage.updated_by_id(person_id),
    )


@router.delete("/{person_id}")
async def delete_person(
    person_id: str,
    repo: PersonRepository = Depends(get_person_repository),
):
    """Remove a person and return its last state."""
    person = await repo.delete(parse_person_id(person_id))
    if person is None:
        raise _not_found(person_id, "delete")
    logger.info(
        f"Person deleted: {person_id}",
        extra={"person_id": person_id, "operation": "delete"},
    )
    return envelope_response(
        status.HTTP_200_OK, True, person,
        EnvelopeMessage.deleted_by_id(person_id),
    )
