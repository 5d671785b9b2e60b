"""Search Filter — verifies query blank-check, field parsing, and LIKE escaping.

Invariants:
    - None, "" and whitespace-only queries are blank
    - Unknown field names are dropped, known wire names map to ORM attributes
    - %, _ and the escape character itself are always escaped
"""

from person_api.core.search_filter import (
    contains_pattern,
    escape_like,
    is_blank_query,
    parse_search_fields,
    resolve_search_attributes,
)


def test_blank_queries():
    assert is_blank_query(None)
    assert is_blank_query("")
    assert is_blank_query(" ")
    assert is_blank_query("\t ")
    assert not is_blank_query("ali")


def test_parse_fields_strips_and_dedupes():
    assert parse_search_fields(" name, email ,name,,") == ["name", "email"]


def test_parse_fields_defaults_to_name():
    assert parse_search_fields(None) == ["name"]
    assert parse_search_fields(" , ") == ["name"]


def test_unknown_fields_are_dropped():
    assert resolve_search_attributes(["name", "password", "companyId"]) == [
        "name", "company_id",
    ]
    assert resolve_search_attributes(["nope"]) == []


def test_escape_like_metacharacters():
    assert escape_like("50%_off") == "50\\%\\_off"
    assert escape_like("a\\b") == "a\\\\b"


def test_plain_query_is_unchanged():
    assert escape_like("alice") == "alice"


def test_contains_pattern_wraps_escaped_query():
    assert contains_pattern("a%") == "%a\\%%"
