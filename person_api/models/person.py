"""Person ORM — persists the people managed by the API.

Invariants:
    - id is UUID primary key (client never chooses it)
    - name and company_id are non-nullable
    - company_id is kept as the caller sent it (string), reinterpreted as a
      Company id only when a read joins the companies table
    - created is set on insert and drives the default list ordering

Design Decisions:
    - No ForeignKey on company_id: Person holds a non-owning reference and a
      malformed value must surface at read time, not at insert time
    - Index on created: list endpoint always orders by it
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from person_api.db.base import Base


class Person(Base):
    """Person entity — one row per person document."""
    __tablename__ = "people"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    surname: Mapped[str | None] = mapped_column(String(200), nullable=True)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    position: Mapped[str | None] = mapped_column(String(200), nullable=True)
    company_id: Mapped[str] = mapped_column(String(64), nullable=False)
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )
