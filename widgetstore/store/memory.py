"""
In-memory document store for tests and local development.

Behaves like the hosted collection API for the operations the store uses:
generated ids, server-side timestamps, equality filters and partial updates.
Data lives only as long as the process.
"""
from __future__ import annotations

import copy
import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from .ports import RESERVED_KEYS, Document, DocumentNotFoundError


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _payload(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: copy.deepcopy(v) for k, v in data.items() if k not in RESERVED_KEYS}


class InMemoryDocumentStore:
    """Thread-safe dict-of-dicts implementation of DocumentStoreProtocol."""

    def __init__(self) -> None:
        self._collections: Dict[str, Dict[str, Document]] = {}
        self._lock = threading.Lock()

    def list_documents(
        self, collection: str, *, filters: Optional[Mapping[str, Any]] = None
    ) -> List[Document]:
        # Updates mutate stored dicts in place; copy them before releasing the lock.
        with self._lock:
            docs = [
                copy.deepcopy(d)
                for d in self._collections.get(collection, {}).values()
                if not filters or all(d.get(k) == v for k, v in filters.items())
            ]
        return docs

    def create_document(self, collection: str, data: Mapping[str, Any]) -> Document:
        now = _now()
        doc: Document = {"$id": uuid4().hex, "$createdAt": now, "$updatedAt": now}
        doc.update(_payload(data))
        with self._lock:
            self._collections.setdefault(collection, {})[doc["$id"]] = doc
        return copy.deepcopy(doc)

    def update_document(self, collection: str, document_id: str, data: Mapping[str, Any]) -> Document:
        with self._lock:
            doc = self._collections.get(collection, {}).get(document_id)
            if doc is None:
                raise DocumentNotFoundError(f"{collection}/{document_id}")
            doc.update(_payload(data))
            doc["$updatedAt"] = _now()
            return copy.deepcopy(doc)

    def delete_document(self, collection: str, document_id: str) -> None:
        with self._lock:
            bucket = self._collections.get(collection, {})
            if document_id not in bucket:
                raise DocumentNotFoundError(f"{collection}/{document_id}")
            del bucket[document_id]


def build() -> InMemoryDocumentStore:
    """Factory used by the web wiring to instantiate the store."""
    return InMemoryDocumentStore()
