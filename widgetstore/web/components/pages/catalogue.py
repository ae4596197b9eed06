"""
Catalogue Page Component

Home page of the store: widget of the day, featured row, search box with the
category filter and the result grid. The grid is also returned alone for
HTMX search requests.
"""

from typing import Optional, Sequence

from widgetstore.catalog import ALL_CATEGORIES, Widget, WidgetOfTheDay

from ..base import Component
from ..cards import WidgetCard, WidgetGrid, WidgetOfTheDayCard


class CatalogueSearch(Component):
    def __init__(self, *, query: str, category: str, categories: Sequence[str]) -> None:
        self.query = query
        self.category = category
        self.categories = list(categories)

    def render(self) -> str:
        options = []
        for name in [ALL_CATEGORIES, *self.categories]:
            selected = " selected" if name == self.category else ""
            options.append(f'<option value="{self.escape(name)}"{selected}>{self.escape(name)}</option>')
        return (
            '<form class="catalogue-search" method="get" action="/" role="search" '
            'hx-get="/" hx-target="#widget-results" hx-trigger="input changed delay:300ms from:input, change from:select">'
            f'<input type="search" name="q" value="{self.escape(self.query)}" placeholder="Search widgets..." aria-label="Search widgets">'
            f'<select name="category" aria-label="Category">{"".join(options)}</select>'
            '<a class="btn btn-ghost" href="/?random=1" title="Search for a random tag">Random</a>'
            "</form>"
        )


class RecommendationPanel(Component):
    """Form asking the recommendation API; results are filled in by the script on the page."""

    def render(self) -> str:
        return (
            '<section class="recommendations" aria-label="Personalized recommendations">'
            "<h2>Find your next widget</h2>"
            '<form class="recommendation-form" data-endpoint="/api/recommendations">'
            '<input type="text" name="searchQuery" maxlength="200" required placeholder="What do you need help with?" aria-label="What do you need help with?">'
            '<button type="submit" class="btn btn-secondary">Recommend</button>'
            "</form>"
            '<div id="recommendation-results" aria-live="polite"></div>'
            "</section>"
        )


class CataloguePage(Component):
    def __init__(
        self,
        *,
        widgets: Sequence[Widget],
        featured: Sequence[Widget],
        pick: Optional[WidgetOfTheDay],
        query: str = "",
        category: str = ALL_CATEGORIES,
        categories: Sequence[str] = (),
    ) -> None:
        self.widgets = list(widgets)
        self.featured = list(featured)
        self.pick = pick
        self.query = query
        self.category = category
        self.categories = list(categories)

    def render_results(self) -> str:
        return f'<div id="widget-results">{WidgetGrid(self.widgets).render()}</div>'

    def render(self) -> str:
        featured_html = ""
        # The featured row only makes sense on the unfiltered catalogue.
        if self.featured and not self.query and self.category == ALL_CATEGORIES:
            cards = "".join(WidgetCard(w, compact=True).render() for w in self.featured)
            featured_html = f'<section class="featured" aria-label="Featured widgets"><h2>Featured</h2><div class="featured-row">{cards}</div></section>'
        return (
            "<h1>Discover Widgets</h1>"
            f"{WidgetOfTheDayCard(self.pick).render()}"
            f"{featured_html}"
            f"{RecommendationPanel().render()}"
            f"{CatalogueSearch(query=self.query, category=self.category, categories=self.categories).render()}"
            f"{self.render_results()}"
        )
