"""
Widget card components.

WidgetCard renders one catalogue entry in the grid; WidgetOfTheDayCard is the
highlighted banner on the home page. Both only display catalogue data, so the
only dynamic input that needs escaping is the widget text itself.
"""

from typing import Iterable, Optional
from urllib.parse import quote

from widgetstore.catalog import Widget, WidgetOfTheDay

from ..base import Component


class TagBadge(Component):
    """Small pill linking to a catalogue search for the tag."""

    def __init__(self, label: str, *, variant: str = "default", link: bool = True) -> None:
        self.label = label
        self.variant = variant
        self.link = link

    def render(self) -> str:
        css = self.classes("tag-badge", f"tag-badge--{self.variant}")
        if not self.link:
            return f'<span class="{css}">{self.escape(self.label)}</span>'
        attrs = self.attributes(href=f"/?q={quote(self.label)}", class_=css)
        return f"<a {attrs}>{self.escape(self.label)}</a>"


class WidgetCard(Component):
    """
    Renders a catalogue card with image, name, category and tags.

    Args:
        widget: Catalogue entry.
        compact: Hide the description (used for the featured row).
    """

    def __init__(self, widget: Widget, *, compact: bool = False) -> None:
        self.widget = widget
        self.compact = compact

    def render(self) -> str:
        w = self.widget
        href = f"/widgets/{self.escape(w.id)}"
        tags_html = "".join(TagBadge(tag, variant="secondary").render() for tag in w.tags)
        description_html = (
            "" if self.compact else f'<p class="widget-card__description">{self.escape(w.description)}</p>'
        )
        return (
            f'<article class="widget-card" data-widget-id="{self.escape(w.id)}">'
            f'<a href="{href}" class="widget-card__link">'
            f'<img src="{self.escape(w.image_url)}" alt="{self.escape(w.image_hint)}" loading="lazy">'
            f'<h3 class="widget-card__name">{self.escape(w.name)}</h3>'
            "</a>"
            f'<span class="widget-card__category">{self.escape(w.category)}</span>'
            f"{description_html}"
            f'<div class="widget-card__tags">{tags_html}</div>'
            "</article>"
        )


class WidgetGrid(Component):
    """Grid of widget cards with an empty-state message."""

    def __init__(self, widgets: Iterable[Widget], *, empty_hint: str = "Try a different search or category.") -> None:
        self.widgets = list(widgets)
        self.empty_hint = empty_hint

    def render(self) -> str:
        if not self.widgets:
            return (
                '<div class="widget-grid widget-grid--empty">'
                "<p>No widgets found.</p>"
                f'<p class="text-muted">{self.escape(self.empty_hint)}</p>'
                "</div>"
            )
        cards = "".join(WidgetCard(w).render() for w in self.widgets)
        return f'<div class="widget-grid">{cards}</div>'


class WidgetOfTheDayCard(Component):
    def __init__(self, pick: Optional[WidgetOfTheDay]) -> None:
        self.pick = pick

    def render(self) -> str:
        if self.pick is None:
            return ""
        w = self.pick.widget
        return (
            '<section class="widget-of-the-day" aria-label="Widget of the day">'
            '<h2>Widget of the Day</h2>'
            f'<a href="/widgets/{self.escape(w.id)}"><h3>{self.escape(w.name)}</h3></a>'
            f"<p>{self.escape(w.description)}</p>"
            f'<p class="widget-of-the-day__reason">{self.escape(self.pick.reason)}</p>'
            "</section>"
        )
