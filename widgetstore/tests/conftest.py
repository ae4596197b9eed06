"""
Pytest configuration for widget store tests.

Why: Force AnyIO to use the asyncio backend, and give every test a clean
environment plus fresh adapter wiring (in-memory store, stub recommender,
logging contact relay) so tests never depend on each other or on a local .env.
"""
from __future__ import annotations

import pytest

_ENV_VARS = (
    "WIDGETSTORE_ENV",
    "WIDGETSTORE_ENABLE_ADMIN",
    "WIDGETSTORE_TRUST_PROXY",
    "DOCUMENT_STORE_ADAPTER",
    "COMMENTS_COLLECTION_ID",
    "FAQ_COLLECTION_ID",
    "CATEGORIES_COLLECTION_ID",
    "SITE_SETTINGS_COLLECTION_ID",
    "CONTACT_RELAY_URL",
    "CONTACT_RELAY_TIMEOUT",
    "RECOMMENDATION_ADAPTER",
    "RECOMMENDATION_BACKEND",
    "RECOMMENDATION_TIMEOUT",
    "RECOMMENDATION_MAX_RESULTS",
)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _clean_env_and_wiring(monkeypatch: pytest.MonkeyPatch):
    """Reset environment and adapter wiring before and after each test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    from widgetstore.web import wiring

    wiring.reset()
    yield
    wiring.reset()


@pytest.fixture
def store():
    """Fresh in-memory document store wired into the web layer."""
    from widgetstore.store.memory import InMemoryDocumentStore
    from widgetstore.web import wiring

    s = InMemoryDocumentStore()
    wiring.set_store(s)
    return s
