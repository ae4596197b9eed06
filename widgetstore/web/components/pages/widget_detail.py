"""
Widget Detail Page Component

Full description, tags, key features and the two Markdown sections shipped
with every widget ("What's New" and "More Info"), followed by the community
comments.
"""

from widgetstore.catalog import Widget

from ..base import Component
from ..cards import TagBadge
from ..markdown import MarkdownRenderer


class WidgetDetailPage(Component):
    """
    Args:
        widget: Catalogue entry to show.
        comments_html: Pre-rendered CommentsSection.
    """

    def __init__(self, widget: Widget, *, comments_html: str = "") -> None:
        self.widget = widget
        self.comments_html = comments_html

    def _features(self) -> str:
        if not self.widget.key_features:
            return ""
        items = "".join(f"<li>{self.escape(f)}</li>" for f in self.widget.key_features)
        return f'<section class="widget-detail__features"><h2>Key Features</h2><ul>{items}</ul></section>'

    def _markdown_section(self, title: str, source: str, css: str) -> str:
        body = MarkdownRenderer(source).render()
        if not body:
            return ""
        return f'<section class="{css}"><h2>{self.escape(title)}</h2>{body}</section>'

    def render(self) -> str:
        w = self.widget
        tags = "".join(TagBadge(t).render() for t in w.tags)
        whats_new = self._markdown_section("What's New", w.whats_new, "widget-detail__whats-new")
        return (
            f'<article class="widget-detail" data-widget-id="{self.escape(w.id)}">'
            '<a href="/" class="back-link">&larr; Back to all widgets</a>'
            '<header class="widget-detail__header">'
            f'<img src="{self.escape(w.image_url)}" alt="{self.escape(w.image_hint)}">'
            f"<h1>{self.escape(w.name)}</h1>"
            f'<span class="widget-detail__category">{self.escape(w.category)}</span>'
            f'<div class="widget-detail__tags">{tags}</div>'
            "</header>"
            f'<p class="widget-detail__description">{self.escape(w.description)}</p>'
            f"{self._features()}"
            f"{whats_new}"
            f"{self._markdown_section('More Info', w.more_info, 'widget-detail__more-info')}"
            "</article>"
            f"{self.comments_html}"
        )


class NotFoundPage(Component):
    def __init__(self, message: str = "The page you are looking for does not exist.") -> None:
        self.message = message

    def render(self) -> str:
        return (
            '<div class="not-found">'
            "<h1>Not Found</h1>"
            f"<p>{self.escape(self.message)}</p>"
            '<a href="/" class="btn btn-primary">Back to the catalogue</a>'
            "</div>"
        )
