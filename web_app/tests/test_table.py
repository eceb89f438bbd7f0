# tests/test_table.py
# unit tests for dashboard/client/table.py (sort state + sorted projection)

import pytest

from dashboard.client.table import SortConfig, TableControls, columns_of, sort_rows
from dashboard.constants import SORT_ASC, SORT_DESC

pytestmark = pytest.mark.order(3)


def _rows():
    return [
        {"product": "Product 1", "revenue": 300, "region": "West"},
        {"product": "Product 2", "revenue": 100, "region": "East"},
        {"product": "Product 3", "revenue": 200, "region": "West"},
        {"product": "Product 4", "revenue": 100, "region": "North"},
    ]


def test_default_state_is_unsorted():
    table = TableControls(_rows())
    assert table.sort_config == SortConfig(key=None, direction=SORT_ASC)
    assert table.processed_data == _rows()


def test_same_column_toggles_asc_desc():
    table = TableControls(_rows())

    table.handle_sort("revenue")
    assert table.sort_config == SortConfig("revenue", SORT_ASC)
    assert [r["revenue"] for r in table.processed_data] == [100, 100, 200, 300]

    table.handle_sort("revenue")
    assert table.sort_config == SortConfig("revenue", SORT_DESC)
    assert [r["revenue"] for r in table.processed_data] == [300, 200, 100, 100]

    table.handle_sort("revenue")
    assert table.sort_config.direction == SORT_ASC


def test_new_column_starts_ascending():
    table = TableControls(_rows())
    table.handle_sort("revenue")
    table.handle_sort("revenue")
    table.handle_sort("region")
    assert table.sort_config == SortConfig("region", SORT_ASC)
    assert [r["region"] for r in table.processed_data] == ["East", "North", "West", "West"]


def test_strings_compare_lexicographically():
    rows = [{"p": "Product 10"}, {"p": "Product 2"}, {"p": "Product 1"}]
    assert [r["p"] for r in sort_rows(rows, "p")] == ["Product 1", "Product 10", "Product 2"]


def test_sort_is_idempotent():
    once = sort_rows(_rows(), "revenue", SORT_ASC)
    twice = sort_rows(once, "revenue", SORT_ASC)
    assert once == twice


def test_ties_keep_input_order_both_directions():
    asc = sort_rows(_rows(), "revenue", SORT_ASC)
    desc = sort_rows(_rows(), "revenue", SORT_DESC)
    assert [r["product"] for r in asc][:2] == ["Product 2", "Product 4"]
    assert [r["product"] for r in desc][2:] == ["Product 2", "Product 4"]


def test_sorting_never_mutates_loaded_rows():
    rows = _rows()
    table = TableControls(rows)
    table.handle_sort("revenue")
    _ = table.processed_data
    table.handle_sort("region")
    _ = table.processed_data
    assert rows == _rows()
    assert table.processed_data == sorted(_rows(), key=lambda r: r["region"])


def test_mixed_types_fall_back_to_string_order():
    rows = [{"v": 5}, {"v": None}, {"v": "a"}]
    assert [r["v"] for r in sort_rows(rows, "v")] == [5, None, "a"]


def test_columns_follow_first_row():
    assert columns_of(_rows()) == ["product", "revenue", "region"]
    assert columns_of([]) == []
    assert columns_of(None) == []

    table = TableControls(_rows())
    table.handle_sort("region")
    assert table.columns == ["product", "revenue", "region"]


def test_sort_icon_and_reset():
    table = TableControls(_rows())
    assert table.sort_icon("revenue") == ""
    table.handle_sort("revenue")
    assert table.sort_icon("revenue") == "↑"
    assert table.sort_icon("region") == ""
    table.handle_sort("revenue")
    assert table.sort_icon("revenue") == "↓"

    table.reset()
    assert table.sort_config == SortConfig()
