"""Catalogue queries: lookup, search, widget of the day and rating summaries."""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Sequence

from .data import ALL_WIDGETS, FEATURED_WIDGET_IDS, WIDGET_OF_THE_DAY_REASON, Widget

ALL_CATEGORIES = "All"


@dataclass(frozen=True)
class WidgetOfTheDay:
    widget: Widget
    reason: str


@dataclass(frozen=True)
class RatingSummary:
    average: float
    count: int
    stars: int

    @property
    def label(self) -> str:
        plural = "s" if self.count > 1 else ""
        return f"{self.average:.1f} stars from {self.count} review{plural}"


def get_widget(widget_id: str, widgets: Sequence[Widget] = ALL_WIDGETS) -> Optional[Widget]:
    for widget in widgets:
        if widget.id == widget_id:
            return widget
    return None


def featured_widgets(widgets: Sequence[Widget] = ALL_WIDGETS) -> List[Widget]:
    return [w for w in widgets if w.id in FEATURED_WIDGET_IDS]


def all_tags(widgets: Sequence[Widget] = ALL_WIDGETS) -> List[str]:
    """Distinct tags in first-seen order (the pool for the random catalogue search)."""
    seen: dict[str, None] = {}
    for widget in widgets:
        for tag in widget.tags:
            seen.setdefault(tag, None)
    return list(seen)


def search_widgets(
    widgets: Sequence[Widget] = ALL_WIDGETS,
    *,
    query: str = "",
    category: str = ALL_CATEGORIES,
) -> List[Widget]:
    """Filter by category, then by a case-insensitive substring search.

    The search matches the widget name, description or any tag. An empty
    query keeps every widget of the selected category.
    """
    result = list(widgets)
    if category and category != ALL_CATEGORIES:
        result = [w for w in result if w.category == category]
    needle = (query or "").strip().lower()
    if needle:
        result = [
            w
            for w in result
            if needle in w.name.lower()
            or needle in w.description.lower()
            or any(needle in tag.lower() for tag in w.tags)
        ]
    return result


def resolve_category(query: str, category_names: Iterable[str]) -> str:
    """Return the category a free-text search term names, else "All"."""
    wanted = (query or "").strip().lower()
    if wanted:
        for name in category_names:
            if name.lower() == wanted:
                return name
    return ALL_CATEGORIES


def widget_of_the_day(today: Optional[date] = None, widgets: Sequence[Widget] = ALL_WIDGETS) -> WidgetOfTheDay:
    """Rotate through the catalogue by day of year (January 1st is day 1)."""
    if not widgets:
        raise LookupError("catalog_empty")
    day_of_year = (today or date.today()).timetuple().tm_yday
    return WidgetOfTheDay(widget=widgets[day_of_year % len(widgets)], reason=WIDGET_OF_THE_DAY_REASON)


def rating_summary(ratings: Iterable[int]) -> RatingSummary:
    values = [int(r) for r in ratings]
    if not values:
        return RatingSummary(average=0.0, count=0, stars=0)
    average = sum(values) / len(values)
    # Half rounds up (3.5 -> 4 stars).
    stars = min(5, int(math.floor(average + 0.5)))
    return RatingSummary(average=average, count=len(values), stars=stars)
