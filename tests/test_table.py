import pytest

from zepkit.table import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_ASC,
    DEFAULT_SORT_KEY,
    Column,
    Table,
)


def _table():
    return Table(
        "sessions",
        [
            Column("Session", True, "session_id"),
            Column("Created", True, "created_at"),
            Column("User", False, "user_id"),
        ],
    )


def test_defaults_from_source():
    table = _table()
    assert table.effective_page_size() == 10
    assert table.order_by_key() == "created_at"
    table.parse_query_params("")
    assert table.asc is False
    assert table.page_size == 10


def test_offset_invariant():
    table = _table()
    table.page_size = 10
    table.current_page = 1
    assert table.offset() == 0
    table.current_page = 4
    assert table.offset() == 3 * table.page_size


def test_order_by_key_falls_back():
    table = _table()
    assert table.order_by_key() == DEFAULT_SORT_KEY
    table.order_by = "bogus"
    assert table.order_by_key() == DEFAULT_SORT_KEY
    table.order_by = "session_id"
    assert table.order_by_key() == "session_id"
    table.order_by = "user_id"
    assert table.order_by_key() == "user_id"


def test_effective_page_size():
    table = _table()
    assert table.effective_page_size() == DEFAULT_PAGE_SIZE
    table.page_size = 25
    assert table.effective_page_size() == 25


@pytest.mark.parametrize("total", [0, 1, 9, 10, 11, 99, 100, 101])
@pytest.mark.parametrize("size", [0, 3, 10])
def test_page_count_covers_rows(total, size):
    table = _table()
    table.total_count = total
    table.page_size = size
    count = table.page_count()
    eff = table.effective_page_size()
    assert count * eff >= total
    assert max(count - 1, 0) * eff < total or total == 0


def test_parse_defaults():
    table = _table()
    table.current_page = 7
    table.asc = True
    table.order_by = "x"
    table.parse_query_params("")
    assert table.current_page == 1
    assert table.page_size == DEFAULT_PAGE_SIZE
    assert table.order_by == DEFAULT_SORT_KEY
    assert table.asc is DEFAULT_SORT_ASC


@pytest.mark.parametrize(
    "query,page",
    [("page=4", 4), ("page=0", 1), ("page=abc", 1), ("?page=2&x=1", 2), ("page=", 1)],
)
def test_parse_page(query, page):
    table = _table()
    table.parse_query_params(query)
    assert table.current_page == page


@pytest.mark.parametrize(
    "value,expected", [("true", True), ("T", True), ("1", True), ("0", False), ("maybe", False)]
)
def test_parse_asc(value, expected):
    table = _table()
    table.parse_query_params({"asc": value})
    assert table.asc is expected


def test_parse_order_and_mapping_lists():
    table = _table()
    table.parse_query_params({"order": ["session_id", "other"], "page": ["3"]})
    assert table.order_by == "session_id"
    assert table.current_page == 3
    table.parse_query_params({"order": ""})
    assert table.order_by == DEFAULT_SORT_KEY


def test_table_path():
    table = _table()
    table.parse_query_params("order=session_id&asc=true")
    assert table.table_path("/admin/sessions") == "/admin/sessions?order=session_id&asc=true"
    table.parse_query_params("order=nope")
    assert table.table_path("/admin/sessions") == "/admin/sessions?order=created_at&asc=false"