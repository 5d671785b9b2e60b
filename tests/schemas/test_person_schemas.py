"""Person Schemas — verifies create/update validation and wire aliases.

Invariants:
    - PersonCreate requires name and companyId; name is stripped
    - PersonUpdate.changes() contains only supplied fields, keyed by attribute
    - name/companyId cannot be nulled on update
    - PersonWithCompany.company holds at most one company
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from person_api.schemas.envelope import Envelope, Pagination
from person_api.schemas.person import (
    CompanyResponse, PersonCreate, PersonUpdate, PersonWithCompany,
)

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def test_create_accepts_camel_case_company_id():
    body = PersonCreate.model_validate({"name": " Alice ", "companyId": "c1"})
    assert body.name == "Alice"
    assert body.model_dump() == {
        "name": "Alice", "surname": None, "email": None, "phone": None,
        "position": None, "company_id": "c1",
    }


@pytest.mark.parametrize(
    "payload", [{"name": "Alice"}, {"companyId": "c1"}, {"name": "", "companyId": "c1"}],
)
def test_create_rejects_missing_required(payload):
    with pytest.raises(ValidationError):
        PersonCreate.model_validate(payload)


def test_update_changes_only_supplied_fields():
    body = PersonUpdate.model_validate({"position": "CTO", "companyId": "c2"})
    assert body.changes() == {"position": "CTO", "company_id": "c2"}


def test_update_empty_body_has_no_changes():
    assert PersonUpdate.model_validate({}).changes() == {}


@pytest.mark.parametrize("payload", [{"name": None}, {"companyId": None}])
def test_update_rejects_nulling_required(payload):
    with pytest.raises(ValidationError):
        PersonUpdate.model_validate(payload)


def test_company_list_bounded_to_one():
    company = CompanyResponse(id=uuid4(), name="Acme", created=NOW)
    with pytest.raises(ValidationError):
        PersonWithCompany.model_validate({
            "id": uuid4(), "name": "A", "companyId": "c", "created": NOW,
            "company": [company, company],
        })


def test_person_wire_uses_company_id_alias():
    person = PersonWithCompany.model_validate({
        "id": uuid4(), "name": "A", "companyId": "c", "created": NOW,
    })
    wire = person.to_wire()
    assert wire["companyId"] == "c"
    assert wire["company"] == []


def test_envelope_omits_pagination_unless_set():
    plain = Envelope(success=True, result=[], message="ok").to_content()
    paged = Envelope(
        success=True, result=[], message="ok",
        pagination=Pagination(page=1, pages=0, count=0),
    ).to_content()
    assert "pagination" not in plain
    assert paged["pagination"] == {"page": 1, "pages": 0, "count": 0}
