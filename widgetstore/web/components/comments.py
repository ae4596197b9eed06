"""
Community comments section for the widget detail page.

Shows the rating summary, the comment form and the existing comments (newest
first). Comment bodies are user-written Markdown and go through the safe
renderer; author names are escaped like any other text.
"""

from typing import Dict, Iterable, List, Optional

from widgetstore.catalog import RatingSummary
from widgetstore.storefront import Comment

from .base import Component
from .forms.fields import SubmitButton, TextAreaField, TextInputField
from .markdown import MarkdownRenderer

MARKDOWN_HINT = "Supports **bold**, _italic_, ~~strike~~, `code`, [links](https://example.com) and > quotes."


class RatingStars(Component):
    def __init__(self, summary: RatingSummary) -> None:
        self.summary = summary

    def render(self) -> str:
        stars = "".join(
            f'<span class="{self.classes("star", filled=i < self.summary.stars)}" aria-hidden="true">&#9733;</span>'
            for i in range(5)
        )
        if self.summary.count == 0:
            caption = "No reviews yet"
        else:
            caption = self.summary.label
        return f'<div class="rating-stars" aria-label="{self.escape(caption)}">{stars}<p class="text-muted">{self.escape(caption)}</p></div>'


class CommentForm(Component):
    def __init__(
        self,
        widget_id: str,
        *,
        values: Optional[Dict[str, str]] = None,
        error: Optional[str] = None,
    ) -> None:
        self.widget_id = widget_id
        self.values = values or {}
        self.error = error

    def _rating_inputs(self) -> str:
        current = str(self.values.get("rating", ""))
        options = []
        for star in range(1, 6):
            attrs = self.attributes(
                type="radio",
                name="rating",
                id=f"rating-{star}",
                value=str(star),
                checked=current == str(star),
                required=star == 1,
            )
            options.append(f'<label for="rating-{star}"><input {attrs}> {star}</label>')
        return f'<fieldset class="rating-input"><legend>Your Rating</legend>{"".join(options)}</fieldset>'

    def render(self) -> str:
        action = f"/widgets/{self.escape(self.widget_id)}/comments"
        error_html = f'<div class="alert alert-error" role="alert">{self.escape(self.error)}</div>' if self.error else ""
        author_html = TextInputField("author", "Your name", required=True).render(
            value=self.values.get("author", ""), autocomplete="name"
        )
        text_html = TextAreaField("text", "Comment", required=True, help_text=MARKDOWN_HINT).render(
            value=self.values.get("text", ""), rows=4
        )
        return (
            f'<form class="comment-form" method="post" action="{action}" '
            f'hx-post="{action}" hx-target="#comments" hx-swap="outerHTML">'
            f"{error_html}{self._rating_inputs()}{author_html}{text_html}"
            f"{SubmitButton('Post Comment').render()}"
            "</form>"
        )


class CommentList(Component):
    def __init__(self, comments: Iterable[Comment]) -> None:
        self.comments: List[Comment] = list(comments)

    def render(self) -> str:
        if not self.comments:
            return '<p class="comments-empty text-muted">Be the first to comment.</p>'
        items = []
        for c in self.comments:
            items.append(
                f'<li class="comment" id="comment-{self.escape(c.id)}">'
                '<div class="comment__meta">'
                f'<span class="comment__author">{self.escape(c.author)}</span>'
                f'<span class="comment__rating">{c.rating}/5</span>'
                f'<time datetime="{self.escape(c.created_at)}">{self.escape(c.created_at[:10])}</time>'
                "</div>"
                f'{MarkdownRenderer(c.text, css_class="comment__body").render()}'
                "</li>"
            )
        return f'<ul class="comment-list">{"".join(items)}</ul>'


class CommentsSection(Component):
    """
    Args:
        widget_id: Widget the comments belong to.
        comments: Comments, newest first.
        summary: Rating summary over the same comments.
        form_values/form_error: Re-render state after a rejected submission.
    """

    def __init__(
        self,
        widget_id: str,
        comments: Iterable[Comment],
        summary: RatingSummary,
        *,
        form_values: Optional[Dict[str, str]] = None,
        form_error: Optional[str] = None,
    ) -> None:
        self.widget_id = widget_id
        self.comments = list(comments)
        self.summary = summary
        self.form_values = form_values
        self.form_error = form_error

    def render(self) -> str:
        return (
            '<section id="comments" class="comments-section">'
            "<h2>Community Comments</h2>"
            f"{RatingStars(self.summary).render()}"
            f"{CommentForm(self.widget_id, values=self.form_values, error=self.form_error).render()}"
            f"{CommentList(self.comments).render()}"
            "</section>"
        )
