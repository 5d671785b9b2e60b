"""Search Filter — pure helpers for the person substring search.

Invariants:
    - A blank query never reaches the store
    - Only whitelisted wire fields map to attributes; unknown names are dropped
    - LIKE wildcards in the caller's query are always escaped

Design Decisions:
    - Substring match via LIKE/ILIKE over a regex: no user-controlled pattern
      complexity, works on both PostgreSQL and SQLite
"""

LIKE_ESCAPE = "\\"
DEFAULT_SEARCH_FIELDS = ("name",)

# wire name -> ORM attribute
SEARCHABLE_FIELDS: dict[str, str] = {
    "name": "name",
    "surname": "surname",
    "email": "email",
    "phone": "phone",
    "position": "position",
    "companyId": "company_id",
}


def is_blank_query(query: str | None) -> bool:
    """True for a missing, empty or whitespace-only query."""
    return query is None or not query.strip()


def parse_search_fields(raw: str | None) -> list[str]:
    """Split a comma-separated field list, dropping blanks and duplicates."""
    if raw is None:
        return list(DEFAULT_SEARCH_FIELDS)
    fields: list[str] = []
    for part in raw.split(","):
        name = part.strip()
        if name and name not in fields:
            fields.append(name)
    return fields or list(DEFAULT_SEARCH_FIELDS)


def resolve_search_attributes(fields: list[str]) -> list[str]:
    """Map wire field names to ORM attributes, skipping unknown ones."""
    return [SEARCHABLE_FIELDS[f] for f in fields if f in SEARCHABLE_FIELDS]


def escape_like(query: str) -> str:
    """Escape LIKE metacharacters so the query matches literally."""
    return (
        query.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_pattern(query: str) -> str:
    """LIKE pattern matching any value that contains `query`."""
    return f"%{escape_like(query)}%"
