"""Person Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - PersonCreate.name: 1-200 chars, stripped, non-empty; companyId required
    - PersonUpdate: every field optional, but name/companyId cannot be nulled
    - Wire names are camelCase (companyId); attribute names are snake_case
    - PersonWithCompany.company is a list of 0 or 1 companies, never a scalar

Design Decisions:
    - populate_by_name + alias: accept and emit companyId while ORM uses company_id
    - Unknown body fields ignored (pydantic default), matching a strict document schema
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PersonCreate(BaseModel):
    """Person creation — name and companyId are mandatory."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1, max_length=200)
    surname: str | None = Field(None, max_length=200)
    email: str | None = Field(None, max_length=320)
    phone: str | None = Field(None, max_length=50)
    position: str | None = Field(None, max_length=200)
    company_id: str = Field(alias="companyId", min_length=1, max_length=64)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class PersonUpdate(BaseModel):
    """Partial update: only supplied fields are merged."""
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(None, min_length=1, max_length=200)
    surname: str | None = Field(None, max_length=200)
    email: str | None = Field(None, max_length=320)
    phone: str | None = Field(None, max_length=50)
    position: str | None = Field(None, max_length=200)
    company_id: str | None = Field(
        None, alias="companyId", min_length=1, max_length=64,
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v

    @model_validator(mode="after")
    def required_fields_not_nulled(self):
        for name in ("name", "company_id"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be set to null")
        return self

    def changes(self) -> dict:
        """Supplied fields only, keyed by ORM attribute name."""
        return self.model_dump(exclude_unset=True)


class CompanyResponse(BaseModel):
    """Company as embedded in a person read."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str | None = None
    phone: str | None = None
    website: str | None = None
    created: datetime


class PersonResponse(BaseModel):
    """Person response — public-facing person data."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    name: str
    surname: str | None = None
    email: str | None = None
    phone: str | None = None
    position: str | None = None
    company_id: str = Field(alias="companyId")
    created: datetime

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class PersonWithCompany(PersonResponse):
    """Person joined with its company (0 or 1 element)."""
    company: list[CompanyResponse] = Field(default_factory=list, max_length=1)
