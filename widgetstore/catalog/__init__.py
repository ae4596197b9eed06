"""Widget catalogue: static data plus search/ranking helpers."""

from .data import ALL_WIDGETS, FEATURED_WIDGET_IDS, Widget
from .service import (
    ALL_CATEGORIES,
    RatingSummary,
    WidgetOfTheDay,
    all_tags,
    featured_widgets,
    get_widget,
    rating_summary,
    resolve_category,
    search_widgets,
    widget_of_the_day,
)

__all__ = [
    "ALL_WIDGETS",
    "FEATURED_WIDGET_IDS",
    "Widget",
    "ALL_CATEGORIES",
    "RatingSummary",
    "WidgetOfTheDay",
    "all_tags",
    "featured_widgets",
    "get_widget",
    "rating_summary",
    "resolve_category",
    "search_widgets",
    "widget_of_the_day",
]
