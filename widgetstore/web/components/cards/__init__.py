"""
Card components for the widget store.

This module exposes the catalogue cards used on the home and detail pages.
"""

from .widget import TagBadge, WidgetCard, WidgetGrid, WidgetOfTheDayCard

__all__ = ["TagBadge", "WidgetCard", "WidgetGrid", "WidgetOfTheDayCard"]
