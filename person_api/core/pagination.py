"""Pagination — page window arithmetic for list endpoints.

Invariants:
    - page >= 1, 1 <= limit <= max_limit
    - offset = page * limit - limit, always < 2**63
    - total_pages(0, limit) == 0

Design Decisions:
    - Raw query strings parsed here (not by FastAPI): garbage falls back to defaults
      instead of failing the request
    - Oversized limits are clamped, not rejected; so are pages whose offset
      would overflow the database integer (they stay past-the-end, hence empty)
"""

import math
from dataclasses import dataclass

MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class PageWindow:
    """Resolved page/limit pair for one list request."""
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return self.page * self.limit - self.limit


def resolve_page_window(
    page_raw: str | None,
    items_raw: str | None,
    default_limit: int = 10,
    max_limit: int = 100,
) -> PageWindow:
    """Build a PageWindow from raw `page` and `items` query values."""
    page = _parse_positive_int(page_raw) or 1
    limit = min(_parse_positive_int(items_raw) or default_limit, max_limit)
    return PageWindow(page=min(page, max_page(limit)), limit=limit)


def max_page(limit: int) -> int:
    """Largest page whose offset still fits a signed 64-bit OFFSET."""
    return MAX_OFFSET // limit


def total_pages(count: int, limit: int) -> int:
    """Number of pages needed to show `count` documents."""
    return math.ceil(count / limit)


def _parse_positive_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if value > 0 else None
