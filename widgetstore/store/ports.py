"""
Document store port used by the storefront services.

Intent:
    The store keeps comments, FAQ entries, categories and site settings in a
    hosted document database. Services only depend on this small contract so
    tests and local development can use the in-memory adapter.

Design:
    - Documents are plain dicts. The store owns the reserved keys `$id`,
      `$createdAt` and `$updatedAt` (ISO-8601, UTC).
    - Filters are equality matches on top-level keys.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol

Document = Dict[str, Any]

RESERVED_KEYS = ("$id", "$createdAt", "$updatedAt")


class DocumentStoreProtocol(Protocol):
    """List/create/update/delete over named collections."""

    def list_documents(
        self, collection: str, *, filters: Optional[Mapping[str, Any]] = None
    ) -> List[Document]: ...

    def create_document(self, collection: str, data: Mapping[str, Any]) -> Document: ...

    def update_document(self, collection: str, document_id: str, data: Mapping[str, Any]) -> Document: ...

    def delete_document(self, collection: str, document_id: str) -> None: ...


class DocumentStoreError(Exception):
    """Base class for document store failures (network, permissions, ...)."""


class DocumentNotFoundError(DocumentStoreError, LookupError):
    """The addressed document does not exist in the collection."""


__all__ = [
    "Document",
    "RESERVED_KEYS",
    "DocumentStoreProtocol",
    "DocumentStoreError",
    "DocumentNotFoundError",
]
