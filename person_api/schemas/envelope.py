"""Envelope Schemas — the uniform {success, result, message} response wrapper.

Invariants:
    - Every response body (success or failure) has success, result, message
    - pagination appears only on list responses (omitted, not null, elsewhere)
"""

from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel


class Pagination(BaseModel):
    page: int
    pages: int
    count: int


class Envelope(BaseModel):
    success: bool
    result: Any = None
    message: str
    pagination: Pagination | None = None

    def to_content(self) -> dict:
        content = self.model_dump(mode="json")
        if self.pagination is None:
            content.pop("pagination")
        return content


def envelope_response(
    status_code: int,
    success: bool,
    result: Any,
    message: str,
    pagination: Pagination | None = None,
) -> JSONResponse:
    """Wrap a handler outcome in the envelope with an explicit status code."""
    envelope = Envelope(
        success=success, result=result, message=message, pagination=pagination,
    )
    return JSONResponse(status_code=status_code, content=envelope.to_content())
