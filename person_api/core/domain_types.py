"""Domain Types — identifiers and response messages shared across the codebase.

Invariants:
    - PersonId, CompanyId wrap UUIDs; never use bare UUID in domain logic
    - parse_* helpers are the only place raw strings become identifiers
    - Envelope messages are fixed strings (clients match on them)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID

from person_api.core.errors import ErrorContext, InvalidIdentifierError


# ─── Identity Types ──────────────────────────────────────────────

PersonId = NewType("PersonId", UUID)
CompanyId = NewType("CompanyId", UUID)


def parse_person_id(raw: str) -> PersonId:
    """Read a path parameter as a PersonId."""
    return PersonId(_parse_uuid(raw, "person"))


def parse_company_id(raw: str | None) -> CompanyId:
    """Reinterpret a stored companyId string as a CompanyId."""
    return CompanyId(_parse_uuid(raw, "company"))


def _parse_uuid(raw: str | None, kind: str) -> UUID:
    try:
        return UUID(str(raw))
    except (TypeError, ValueError):
        raise InvalidIdentifierError(
            kind, str(raw), ErrorContext(debug_info={"raw": raw}),
        )


# ─── Enums ───────────────────────────────────────────────────────

class EnvelopeMessage(str, Enum):
    """Fixed envelope messages for successful or empty outcomes."""
    CREATED = "Successfully Created the document in Model"
    FOUND_ALL = "Successfully found all documents"
    COLLECTION_EMPTY = "Collection is Empty"
    NO_MATCH = "No document found by this request"

    @staticmethod
    def found_by_id(person_id: str) -> str:
        """Read success message."""
        return f"we found this document by this id: {person_id}"

    @staticmethod
    def updated_by_id(person_id: str) -> str:
        """Update success message."""
        return f"we update this document by this id: {person_id}"

    @staticmethod
    def deleted_by_id(person_id: str) -> str:
        """Delete success message."""
        return f"Successfully Deleted the document by id: {person_id}"
