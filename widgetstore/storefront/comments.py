"""Widget comments and ratings service layer."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from widgetstore.catalog import Widget, get_widget
from widgetstore.catalog.service import RatingSummary, rating_summary
from widgetstore.store.ports import Document, DocumentStoreProtocol

# Real names only: letters (including accented ones) and spaces.
_AUTHOR_PATTERN = re.compile(r"^[^\W\d_]+(?: [^\W\d_]+)*$")

MAX_AUTHOR_LENGTH = 80
MAX_TEXT_LENGTH = 2000


@dataclass
class Comment:
    id: str
    widget_id: str
    author: str
    text: str
    rating: int
    created_at: str

    @classmethod
    def from_document(cls, doc: Document) -> "Comment":
        return cls(
            id=str(doc.get("$id", "")),
            widget_id=str(doc.get("widgetId", "")),
            author=str(doc.get("author", "")),
            text=str(doc.get("text", "")),
            rating=int(doc.get("rating") or 0),
            created_at=str(doc.get("$createdAt", "")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "widgetId": self.widget_id,
            "author": self.author,
            "text": self.text,
            "rating": self.rating,
            "createdAt": self.created_at,
        }


def validate_author(name: str) -> str:
    normalized = " ".join((name or "").split())
    if not normalized or len(normalized) > MAX_AUTHOR_LENGTH:
        raise ValueError("invalid_author")
    if not _AUTHOR_PATTERN.match(normalized):
        raise ValueError("invalid_author")
    return normalized


def validate_rating(value: object) -> int:
    if isinstance(value, bool):
        raise ValueError("invalid_rating")
    try:
        rating = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValueError("invalid_rating")
    if str(rating) != str(value).strip() or not 1 <= rating <= 5:
        raise ValueError("invalid_rating")
    return rating


def _newest_first(docs: List[Document]) -> List[Document]:
    # Reverse first so equal timestamps keep newest-inserted first.
    return sorted(reversed(docs), key=lambda d: str(d.get("$createdAt", "")), reverse=True)


@dataclass
class CommentsService:
    """Read and write widget comments independent of the web adapter."""

    store: DocumentStoreProtocol
    collection: str = "comments"
    lookup_widget: Callable[[str], Optional[Widget]] = field(default=get_widget)

    def list_for_widget(self, widget_id: str) -> List[Comment]:
        docs = self.store.list_documents(self.collection, filters={"widgetId": widget_id})
        return [Comment.from_document(d) for d in _newest_first(docs)]

    def list_all(self) -> List[Comment]:
        docs = self.store.list_documents(self.collection)
        return [Comment.from_document(d) for d in _newest_first(docs)]

    def rating_for_widget(self, widget_id: str) -> RatingSummary:
        return rating_summary(c.rating for c in self.list_for_widget(widget_id))

    def create(self, widget_id: str, *, author: str, text: str, rating: object) -> Comment:
        """Validate and store a new comment.

        Raises:
            LookupError("widget_not_found") for unknown widgets.
            ValueError("invalid_author" | "invalid_text" | "invalid_rating").
        """
        if self.lookup_widget(widget_id) is None:
            raise LookupError("widget_not_found")
        body = text or ""
        if not body.strip() or len(body) > MAX_TEXT_LENGTH:
            raise ValueError("invalid_text")
        doc = self.store.create_document(
            self.collection,
            {
                "widgetId": widget_id,
                "author": validate_author(author),
                "text": body,
                "rating": validate_rating(rating),
            },
        )
        return Comment.from_document(doc)

    def delete(self, comment_id: str) -> None:
        self.store.delete_document(self.collection, comment_id)
