"""Widget categories managed from the admin panel."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from widgetstore.store.ports import Document, DocumentStoreProtocol

MAX_NAME_LENGTH = 60


@dataclass
class CategoryItem:
    id: str
    name: str

    @classmethod
    def from_document(cls, doc: Document) -> "CategoryItem":
        return cls(id=str(doc.get("$id", "")), name=str(doc.get("name", "")))

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}


@dataclass
class CategoryService:
    store: DocumentStoreProtocol
    collection: str = "categories"

    def list(self) -> List[CategoryItem]:
        return [CategoryItem.from_document(d) for d in self.store.list_documents(self.collection)]

    def names(self) -> List[str]:
        return [c.name for c in self.list()]

    def get(self, category_id: str) -> CategoryItem:
        for item in self.list():
            if item.id == category_id:
                return item
        raise LookupError("category_not_found")

    def _validated_name(self, name: str, *, exclude_id: Optional[str] = None) -> str:
        normalized = " ".join((name or "").split())
        if not normalized or len(normalized) > MAX_NAME_LENGTH:
            raise ValueError("invalid_name")
        # "All" is the catch-all filter entry on the catalogue page.
        if normalized.lower() == "all":
            raise ValueError("reserved_name")
        for existing in self.list():
            if existing.id != exclude_id and existing.name.lower() == normalized.lower():
                raise ValueError("duplicate_name")
        return normalized

    def create(self, *, name: str) -> CategoryItem:
        doc = self.store.create_document(self.collection, {"name": self._validated_name(name)})
        return CategoryItem.from_document(doc)

    def update(self, category_id: str, *, name: str) -> CategoryItem:
        cleaned = self._validated_name(name, exclude_id=category_id)
        return CategoryItem.from_document(self.store.update_document(self.collection, category_id, {"name": cleaned}))

    def delete(self, category_id: str) -> None:
        self.store.delete_document(self.collection, category_id)
