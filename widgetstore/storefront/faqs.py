"""FAQ entries service layer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from widgetstore.store.ports import Document, DocumentStoreProtocol

MAX_QUESTION_LENGTH = 300
MAX_ANSWER_LENGTH = 5000


@dataclass
class FaqItem:
    id: str
    question: str
    answer: str

    @classmethod
    def from_document(cls, doc: Document) -> "FaqItem":
        return cls(
            id=str(doc.get("$id", "")),
            question=str(doc.get("question", "")),
            answer=str(doc.get("answer", "")),
        )

    def to_dict(self) -> dict:
        return {"id": self.id, "question": self.question, "answer": self.answer}


def _clean(question: str, answer: str) -> dict:
    q = (question or "").strip()
    a = (answer or "").strip()
    if not q or len(q) > MAX_QUESTION_LENGTH:
        raise ValueError("invalid_question")
    if not a or len(a) > MAX_ANSWER_LENGTH:
        raise ValueError("invalid_answer")
    return {"question": q, "answer": a}


@dataclass
class FaqService:
    store: DocumentStoreProtocol
    collection: str = "faqs"

    def list(self, query: str = "") -> List[FaqItem]:
        """All entries in store order, optionally narrowed by a search term.

        The search is a case-insensitive substring match on question or
        answer text (the answer's Markdown source, not its rendering).
        """
        items = [FaqItem.from_document(d) for d in self.store.list_documents(self.collection)]
        needle = (query or "").strip().lower()
        if not needle:
            return items
        return [i for i in items if needle in i.question.lower() or needle in i.answer.lower()]

    def get(self, faq_id: str) -> FaqItem:
        for item in self.list():
            if item.id == faq_id:
                return item
        raise LookupError("faq_not_found")

    def create(self, *, question: str, answer: str) -> FaqItem:
        return FaqItem.from_document(self.store.create_document(self.collection, _clean(question, answer)))

    def update(self, faq_id: str, *, question: str, answer: str) -> FaqItem:
        doc = self.store.update_document(self.collection, faq_id, _clean(question, answer))
        return FaqItem.from_document(doc)

    def delete(self, faq_id: str) -> None:
        self.store.delete_document(self.collection, faq_id)
