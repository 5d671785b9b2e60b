"""Pagination — verifies page window resolution and page arithmetic.

Invariants:
    - offset = page * limit - limit
    - Missing, non-numeric or non-positive values fall back to defaults
    - Oversized limits are clamped to max_limit
    - Pages are capped so the offset never overflows a signed 64-bit integer
    - total_pages is ceil(count / limit), 0 for an empty collection
"""

import pytest

from person_api.core.pagination import (
    PageWindow, max_page, resolve_page_window, total_pages,
)


def test_defaults_when_params_missing():
    window = resolve_page_window(None, None)
    assert window == PageWindow(page=1, limit=10)
    assert window.offset == 0


def test_offset_for_later_pages():
    window = resolve_page_window("3", "10")
    assert window.offset == 20


@pytest.mark.parametrize("raw", ["abc", "", "0", "-2", "1.5"])
def test_bad_page_falls_back_to_first_page(raw):
    assert resolve_page_window(raw, "10").page == 1


@pytest.mark.parametrize("raw", ["abc", "0", "-5"])
def test_bad_limit_falls_back_to_default(raw):
    assert resolve_page_window("1", raw, default_limit=7).limit == 7


def test_limit_clamped_to_maximum():
    assert resolve_page_window("1", "5000", max_limit=100).limit == 100


def test_whitespace_around_numbers_is_ignored():
    window = resolve_page_window(" 2 ", " 5 ")
    assert (window.page, window.limit) == (2, 5)


@pytest.mark.parametrize(
    "count,limit,expected",
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3)],
)
def test_total_pages(count, limit, expected):
    assert total_pages(count, limit) == expected


def test_huge_page_capped_so_offset_fits_64_bits():
    window = resolve_page_window(str(10**20), "10")
    assert window.page == max_page(10)
    assert window.offset < 2**63
    assert window.offset + window.limit <= 2**63 - 1


def test_page_cap_depends_on_limit():
    assert resolve_page_window(str(10**30), "1").page == 2**63 - 1
    assert resolve_page_window(str(10**30), "100").offset < 2**63
