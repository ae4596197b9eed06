"""FAQ accordion: one <details> element per entry, Markdown answers."""

from typing import Iterable

from widgetstore.storefront import FaqItem

from .base import Component
from .markdown import MarkdownRenderer


class FaqAccordion(Component):
    def __init__(self, items: Iterable[FaqItem], *, query: str = "") -> None:
        self.items = list(items)
        self.query = query

    def render(self) -> str:
        search = (
            '<form class="faq-search" method="get" action="/faq" role="search">'
            f'<input type="search" name="q" value="{self.escape(self.query)}" placeholder="Search questions..." aria-label="Search FAQ">'
            "</form>"
        )
        if not self.items:
            hint = "No questions match your search." if self.query else "No questions yet."
            return f'{search}<p class="faq-empty text-muted">{self.escape(hint)}</p>'
        entries = "".join(
            f'<details class="faq-item" id="faq-{self.escape(item.id)}">'
            f"<summary>{self.escape(item.question)}</summary>"
            f"{MarkdownRenderer(item.answer, css_class='faq-answer').render()}"
            "</details>"
            for item in self.items
        )
        return f'{search}<div class="faq-accordion">{entries}</div>'
