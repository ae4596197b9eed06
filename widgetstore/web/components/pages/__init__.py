"""
Page Components for the widget store

Each page has its own component class that encapsulates its content
structure; routes fetch the data and pass it in.
"""

from .catalogue import CataloguePage, CatalogueSearch, RecommendationPanel
from .widget_detail import NotFoundPage, WidgetDetailPage

__all__ = ["CataloguePage", "CatalogueSearch", "RecommendationPanel", "NotFoundPage", "WidgetDetailPage"]
