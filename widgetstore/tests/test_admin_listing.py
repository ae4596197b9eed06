"""Filter/sort helpers behind the admin tables."""
from __future__ import annotations

from dataclasses import dataclass

import pytest

from widgetstore.catalog.listing import SortState, filter_and_sort, parse_sort, toggle_sort


@dataclass
class Row:
    id: str
    name: str
    rating: int | None = None


ROWS = [Row("1", "beta", 3), Row("2", "Alpha", 5), Row("3", "gamma", None), Row("4", "alphabet", 3)]


def test_filter_is_case_insensitive_substring_over_fields():
    result = filter_and_sort(ROWS, query="ALPHA", fields=["name"])
    assert [r.id for r in result] == ["2", "4"]


def test_empty_query_keeps_everything_in_order():
    assert [r.id for r in filter_and_sort(ROWS, query="  ", fields=["name"])] == ["1", "2", "3", "4"]


def test_sort_ascending_is_stable_and_puts_missing_first():
    result = filter_and_sort(ROWS, sort=SortState("rating"))
    assert [r.id for r in result] == ["3", "1", "4", "2"]


def test_sort_descending():
    result = filter_and_sort(ROWS, sort=SortState("rating", descending=True))
    assert [r.id for r in result] == ["2", "1", "4", "3"]


def test_works_with_dict_rows():
    rows = [{"id": "a", "name": "Zed"}, {"id": "b", "name": "Amy"}]
    result = filter_and_sort(rows, query="", fields=["name"], sort=SortState("name"))
    assert [r["id"] for r in result] == ["b", "a"]


def test_toggle_sort_flips_active_column_and_resets_new_column():
    current = SortState("name")
    flipped = toggle_sort(current, "name")
    assert flipped == SortState("name", descending=True)
    assert toggle_sort(flipped, "name") == SortState("name")
    assert toggle_sort(flipped, "rating") == SortState("rating")


def test_sort_state_direction_labels():
    assert SortState("x").direction == "ascending"
    assert SortState("x", descending=True).direction == "descending"


@pytest.mark.parametrize(
    "direction,descending",
    [(None, False), ("asc", False), ("ascending", False), ("DESC", True), ("descending", True)],
)
def test_parse_sort_directions(direction, descending):
    state = parse_sort("name", direction, allowed=["name"], default="name")
    assert state == SortState("name", descending=descending)


def test_parse_sort_defaults_and_rejects_unknown():
    assert parse_sort(None, None, allowed=["name", "id"], default="id") == SortState("id")
    with pytest.raises(ValueError, match="invalid_sort"):
        parse_sort("password", None, allowed=["name"], default="name")
    with pytest.raises(ValueError, match="invalid_direction"):
        parse_sort("name", "sideways", allowed=["name"], default="name")
