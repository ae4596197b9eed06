"""
Catalogue queries: lookup, search with category filter, widget of the day
rotation and rating summaries.
"""
from __future__ import annotations

from datetime import date

import pytest

from widgetstore.catalog import (
    ALL_CATEGORIES,
    ALL_WIDGETS,
    all_tags,
    featured_widgets,
    get_widget,
    rating_summary,
    resolve_category,
    search_widgets,
    widget_of_the_day,
)


def test_catalogue_ships_twelve_widgets_with_unique_ids():
    assert len(ALL_WIDGETS) == 12
    assert len({w.id for w in ALL_WIDGETS}) == 12
    assert ALL_WIDGETS[0].name == "ChronoFlow"
    assert ALL_WIDGETS[-1].name == "NutriTrack"


def test_get_widget_known_and_unknown():
    assert get_widget("5").name == "SoundWeave"
    assert get_widget("999") is None


def test_featured_widgets():
    assert [w.name for w in featured_widgets()] == ["ChronoFlow", "SoundWeave", "Zenith", "Glimpse"]


def test_all_tags_first_seen_order_without_duplicates():
    tags = all_tags()
    assert tags[:3] == ["time management", "calendar", "friends"]
    assert len(tags) == len(set(tags))


def test_search_matches_name_description_and_tags_case_insensitive():
    assert [w.id for w in search_widgets(ALL_WIDGETS, query="track")] == ["1", "7", "10", "12"]
    assert [w.id for w in search_widgets(ALL_WIDGETS, query="FRIENDS")] == ["2", "11"]


def test_search_empty_query_keeps_category():
    result = search_widgets(ALL_WIDGETS, category="Health")
    assert [w.name for w in result] == ["CardioFit", "Zenith", "NutriTrack"]


def test_search_combines_category_and_query():
    result = search_widgets(ALL_WIDGETS, query="alerts", category="Weather")
    assert [w.name for w in result] == ["AtmoSphere", "StormChaser"]


def test_search_all_category_is_unfiltered():
    assert len(search_widgets(ALL_WIDGETS, category=ALL_CATEGORIES)) == 12


def test_search_without_hits():
    assert search_widgets(ALL_WIDGETS, query="no such widget") == []


def test_resolve_category_exact_name_case_insensitive():
    names = ["Productivity", "Music"]
    assert resolve_category("music", names) == "Music"
    assert resolve_category("  Productivity ", names) == "Productivity"
    assert resolve_category("musi", names) == ALL_CATEGORIES
    assert resolve_category("", names) == ALL_CATEGORIES


@pytest.mark.parametrize(
    "day,expected",
    [
        (date(2024, 1, 1), "NexusConnect"),
        (date(2024, 1, 12), "ChronoFlow"),
        (date(2023, 12, 31), "TaskMaster"),
    ],
)
def test_widget_of_the_day_rotates_by_day_of_year(day, expected):
    pick = widget_of_the_day(day)
    assert pick.widget.name == expected
    assert pick.reason


def test_widget_of_the_day_empty_catalogue():
    with pytest.raises(LookupError):
        widget_of_the_day(date(2024, 1, 1), widgets=())


def test_rating_summary_rounds_half_up():
    summary = rating_summary([4, 3])
    assert summary.average == 3.5
    assert summary.count == 2
    assert summary.stars == 4
    assert summary.label == "3.5 stars from 2 reviews"


def test_rating_summary_single_and_empty():
    assert rating_summary([5]).label == "5.0 stars from 1 review"
    empty = rating_summary([])
    assert (empty.average, empty.count, empty.stars) == (0.0, 0, 0)
