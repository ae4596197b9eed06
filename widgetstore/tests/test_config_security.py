"""
Security config guard tests.

Production-like environments must fail fast when development conveniences
(in-memory store, stub recommender, logging or plain-HTTP contact relay,
unauthenticated admin panel) are configured; development stays permissive.
"""
from __future__ import annotations

import pytest

from widgetstore.web import config as cfg


def _prod_env(monkeypatch: pytest.MonkeyPatch, **overrides: str) -> None:
    values = {
        "WIDGETSTORE_ENV": "prod",
        "DOCUMENT_STORE_ADAPTER": "acme.documents",
        "RECOMMENDATION_ADAPTER": "acme.recommender",
        "CONTACT_RELAY_URL": "https://relay.example/f/abc",
        "WIDGETSTORE_ENABLE_ADMIN": "false",
    }
    values.update(overrides)
    for key, value in values.items():
        if value is None:
            monkeypatch.delenv(key, raising=False)
        else:
            monkeypatch.setenv(key, value)


def test_dev_defaults_are_permissive():
    config = cfg.load_app_config()
    assert config.environment == "dev"
    assert config.enable_admin is True
    assert config.store_adapter_path == cfg.DEFAULT_STORE_ADAPTER
    assert config.comments_collection == "comments"
    assert config.contact_relay_url == ""
    assert config.contact_relay_timeout_seconds == 10
    cfg.ensure_secure_config_on_startup()


def test_prod_disables_admin_by_default(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WIDGETSTORE_ENV", "production")
    assert cfg.load_app_config().enable_admin is False


def test_collection_ids_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("COMMENTS_COLLECTION_ID", "widget_comments")
    monkeypatch.setenv("FAQ_COLLECTION_ID", "faq_entries")
    config = cfg.load_app_config()
    assert config.comments_collection == "widget_comments"
    assert config.faq_collection == "faq_entries"


def test_prod_with_secure_settings_starts(monkeypatch: pytest.MonkeyPatch):
    _prod_env(monkeypatch)
    cfg.ensure_secure_config_on_startup()


@pytest.mark.parametrize(
    "overrides",
    [
        {"DOCUMENT_STORE_ADAPTER": None},
        {"DOCUMENT_STORE_ADAPTER": "widgetstore.store.memory"},
        {"RECOMMENDATION_ADAPTER": None},
        {"CONTACT_RELAY_URL": None},
        {"CONTACT_RELAY_URL": "http://relay.example/f/abc"},
        {"WIDGETSTORE_ENABLE_ADMIN": "true"},
    ],
)
def test_prod_guard_refuses_insecure_settings(monkeypatch: pytest.MonkeyPatch, overrides):
    _prod_env(monkeypatch, **overrides)
    with pytest.raises(SystemExit):
        cfg.ensure_secure_config_on_startup()


def test_staging_is_prod_like(monkeypatch: pytest.MonkeyPatch):
    _prod_env(monkeypatch, WIDGETSTORE_ENV="staging", WIDGETSTORE_ENABLE_ADMIN="true")
    with pytest.raises(SystemExit):
        cfg.ensure_secure_config_on_startup()


@pytest.mark.parametrize("value", ["0", "61", "ten"])
def test_contact_timeout_range(monkeypatch: pytest.MonkeyPatch, value):
    monkeypatch.setenv("CONTACT_RELAY_TIMEOUT", value)
    with pytest.raises(ValueError, match="CONTACT_RELAY_TIMEOUT"):
        cfg.load_app_config()
