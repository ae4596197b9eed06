"""Site-wide contact details and social links (single settings document)."""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Optional

from widgetstore.store.ports import Document, DocumentStoreProtocol

SETTINGS_KEY = "default-settings"


@dataclass
class SiteSettings:
    email: str = ""
    address: str = ""
    phone: str = ""
    website: str = ""
    facebook: str = ""
    twitter: str = ""
    github: str = ""
    linkedin: str = ""
    id: Optional[str] = None

    @classmethod
    def from_document(cls, doc: Document) -> "SiteSettings":
        values = {f.name: str(doc.get(f.name) or "") for f in fields(cls) if f.name != "id"}
        return cls(id=str(doc.get("$id", "")) or None, **values)

    def payload(self) -> dict:
        data = asdict(self)
        data.pop("id")
        return data

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class SiteSettingsService:
    store: DocumentStoreProtocol
    collection: str = "site_settings"

    def get(self) -> Optional[SiteSettings]:
        docs = self.store.list_documents(self.collection, filters={"key": SETTINGS_KEY})
        if not docs:
            return None
        return SiteSettings.from_document(docs[0])

    def create(self, settings: SiteSettings) -> SiteSettings:
        if self.get() is not None:
            raise ValueError("settings_exist")
        doc = self.store.create_document(self.collection, {**settings.payload(), "key": SETTINGS_KEY})
        return SiteSettings.from_document(doc)

    def update(self, document_id: str, settings: SiteSettings) -> SiteSettings:
        doc = self.store.update_document(self.collection, document_id, settings.payload())
        return SiteSettings.from_document(doc)
