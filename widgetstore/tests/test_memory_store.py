"""In-memory document store: ids, timestamps, filters, copies and not-found errors."""
from __future__ import annotations

import copy

import pytest

from widgetstore.store import DocumentNotFoundError, DocumentStoreError
from widgetstore.store.memory import InMemoryDocumentStore, build


def test_create_assigns_id_and_timestamps():
    s = InMemoryDocumentStore()
    doc = s.create_document("faqs", {"question": "Q", "$id": "forged"})
    assert doc["$id"] and doc["$id"] != "forged"
    assert doc["$createdAt"] == doc["$updatedAt"]
    assert doc["$createdAt"].endswith("+00:00")
    assert doc["question"] == "Q"


def test_list_filters_by_equality_and_keeps_collections_apart():
    s = InMemoryDocumentStore()
    s.create_document("comments", {"widgetId": "1", "text": "a"})
    s.create_document("comments", {"widgetId": "2", "text": "b"})
    s.create_document("faqs", {"widgetId": "1"})
    docs = s.list_documents("comments", filters={"widgetId": "1"})
    assert [d["text"] for d in docs] == ["a"]
    assert len(s.list_documents("comments")) == 2
    assert s.list_documents("missing") == []


def test_returned_documents_are_copies():
    s = InMemoryDocumentStore()
    doc = s.create_document("c", {"tags": ["x"]})
    doc["tags"].append("mutated")
    assert s.list_documents("c")[0]["tags"] == ["x"]


def test_update_merges_and_bumps_updated_at():
    s = InMemoryDocumentStore()
    doc = s.create_document("c", {"a": 1, "b": 2})
    updated = s.update_document("c", doc["$id"], {"b": 3, "$createdAt": "forged"})
    assert updated["a"] == 1 and updated["b"] == 3
    assert updated["$createdAt"] == doc["$createdAt"]
    assert updated["$updatedAt"] >= doc["$updatedAt"]


def test_update_and_delete_missing_raise_not_found():
    s = InMemoryDocumentStore()
    with pytest.raises(DocumentNotFoundError):
        s.update_document("c", "nope", {})
    with pytest.raises(DocumentNotFoundError):
        s.delete_document("c", "nope")
    # Callers may catch either the store base class or LookupError.
    assert issubclass(DocumentNotFoundError, DocumentStoreError)
    assert issubclass(DocumentNotFoundError, LookupError)


def test_delete_removes_document():
    s = build()
    doc = s.create_document("c", {"x": 1})
    s.delete_document("c", doc["$id"])
    assert s.list_documents("c") == []


def test_list_copies_documents_while_holding_the_lock(monkeypatch: pytest.MonkeyPatch):
    s = InMemoryDocumentStore()
    s.create_document("c", {"tags": ["x"]})
    s.create_document("c", {"tags": ["y"]})
    real_deepcopy = copy.deepcopy
    held = []

    def recording_deepcopy(value, *args, **kwargs):
        held.append(s._lock.locked())
        return real_deepcopy(value, *args, **kwargs)

    monkeypatch.setattr(copy, "deepcopy", recording_deepcopy)
    docs = s.list_documents("c")
    monkeypatch.undo()

    assert len(docs) == 2
    # A concurrent in-place update cannot change a document mid-copy.
    assert held and all(held)
