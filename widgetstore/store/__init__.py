"""Document store port and adapters."""

from .memory import InMemoryDocumentStore
from .ports import Document, DocumentNotFoundError, DocumentStoreError, DocumentStoreProtocol

__all__ = [
    "Document",
    "DocumentNotFoundError",
    "DocumentStoreError",
    "DocumentStoreProtocol",
    "InMemoryDocumentStore",
]
