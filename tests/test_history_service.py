# /tests/test_history_service.py

import pytest

from app.services import history_service
from app.services.history_service import build_pagination, resolve_page_request


# --- resolve_page_request ---

def test_defaults_when_nothing_given():
    request = resolve_page_request()
    assert (request.page, request.limit, request.language, request.skip) == (1, 10, None, 0)


@pytest.mark.parametrize("page", [0, -5, "0", "-5", "abc", "", None])
def test_invalid_page_clamps_to_first(page):
    assert resolve_page_request(page=page).page == 1


@pytest.mark.parametrize("limit, expected", [
    (500, 100),
    ("500", 100),
    (0, 1),
    ("0", 1),
    (-3, 1),
    ("abc", 10),
    (None, 10),
    ("25", 25),
])
def test_limit_is_defaulted_and_clamped(limit, expected):
    assert resolve_page_request(limit=limit).limit == expected


def test_leading_integer_is_parsed():
    request = resolve_page_request(page="3abc", limit="20items")
    assert (request.page, request.limit) == (3, 20)


def test_skip_is_derived_from_page_and_limit():
    assert resolve_page_request(page=4, limit=25).skip == 75


def test_language_is_lower_cased():
    assert resolve_page_request(language="  PyThOn ").language == "python"


def test_blank_language_means_no_filter():
    assert resolve_page_request(language="   ").language is None


# --- build_pagination ---

def test_pagination_last_partial_page():
    meta = build_pagination(page=3, limit=10, total_count=25)
    assert meta.totalPages == 3
    assert meta.hasNextPage is False
    assert meta.hasPreviousPage is True


def test_pagination_first_page():
    meta = build_pagination(page=1, limit=10, total_count=25)
    assert meta.hasNextPage is True
    assert meta.hasPreviousPage is False


def test_pagination_empty_result():
    meta = build_pagination(page=1, limit=10, total_count=0)
    assert meta.model_dump() == {
        "page": 1,
        "limit": 10,
        "totalCount": 0,
        "totalPages": 0,
        "hasNextPage": False,
        "hasPreviousPage": False,
    }


def test_pagination_past_the_end():
    meta = build_pagination(page=9, limit=10, total_count=25)
    assert meta.totalPages == 3
    assert meta.hasNextPage is False
    assert meta.hasPreviousPage is True


# --- get_history ---

def test_get_history_pages_through_records(db_service, seed_generations):
    seed_generations(25)

    first = history_service.get_history(db_service, page=1, limit=10)
    last = history_service.get_history(db_service, page=3, limit=10)

    assert len(first.data) == 10
    assert first.data[0].prompt == "Python prompt 24"
    assert len(last.data) == 5
    assert last.data[-1].prompt == "Python prompt 0"
    assert last.pagination.totalCount == 25
    assert last.pagination.totalPages == 3


def test_get_history_page_beyond_end_is_empty(db_service, seed_generations):
    seed_generations(5)
    response = history_service.get_history(db_service, page=4, limit=10)
    assert response.data == []
    assert response.pagination.totalCount == 5
    assert response.pagination.hasNextPage is False


def test_get_history_uses_display_name_and_iso_timestamp(db_service, seed_generations):
    seed_generations(1, language="TypeScript")
    item = history_service.get_history(db_service).data[0]
    assert item.language == "TypeScript"
    assert item.timestamp.startswith("2025-01-01T12:00:00")
    assert item.timestamp.endswith("+00:00")


class _CountOnlyDatabase:
    """Counts work; listing must not be reached."""

    def count_generations(self, language=None):
        return 3

    def list_generations(self, language=None, skip=0, take=10):
        raise AssertionError("list_generations should not be called past the last page")


def test_get_history_past_the_end_skips_the_listing_query():
    response = history_service.get_history(_CountOnlyDatabase(), page=10**20, limit=10)

    assert response.data == []
    assert response.pagination.totalPages == 1
    assert response.pagination.hasNextPage is False
