"""
Adapter wiring for the web layer.

Why:
    Routes need a document store, a recommendation adapter and a contact
    relay. The concrete implementations are chosen by configuration (dotted
    module paths exposing `build()`) and created lazily on first use so that
    importing the app never touches external services. Tests swap adapters
    with the `set_*` helpers and call `reset()` between cases.
"""
from __future__ import annotations

import logging
from importlib import import_module
from typing import Any, Optional

from widgetstore.recommendations import RecommendationAdapterProtocol, RecommendationService
from widgetstore.recommendations.config import load_recommendation_config
from widgetstore.storefront import (
    CategoryService,
    CommentsService,
    ContactService,
    FaqService,
    HttpContactRelay,
    LoggingContactRelay,
    SiteSettingsService,
)
from widgetstore.storefront.contact import ContactRelayProtocol
from widgetstore.store.ports import DocumentStoreProtocol

from .config import AppConfig, load_app_config

logger = logging.getLogger("widgetstore.web")

_CONFIG: Optional[AppConfig] = None
_STORE: Optional[DocumentStoreProtocol] = None
_RECOMMENDER: Optional[RecommendationAdapterProtocol] = None
_CONTACT_RELAY: Optional[ContactRelayProtocol] = None


def _build_from_path(path: str) -> Any:
    module = import_module(path)
    return module.build()  # type: ignore[attr-defined]


def get_config() -> AppConfig:
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = load_app_config()
    return _CONFIG


def get_store() -> DocumentStoreProtocol:
    global _STORE
    if _STORE is None:
        path = get_config().store_adapter_path
        _STORE = _build_from_path(path)
        logger.info("wiring.document_store adapter=%s", path)
    return _STORE


def get_recommendation_adapter() -> RecommendationAdapterProtocol:
    global _RECOMMENDER
    if _RECOMMENDER is None:
        cfg = load_recommendation_config()
        _RECOMMENDER = _build_from_path(cfg.adapter_path)
        logger.info("wiring.recommendations backend=%s adapter=%s", cfg.backend, cfg.adapter_path)
    return _RECOMMENDER


def get_contact_relay() -> ContactRelayProtocol:
    global _CONTACT_RELAY
    if _CONTACT_RELAY is None:
        cfg = get_config()
        if cfg.contact_relay_url:
            _CONTACT_RELAY = HttpContactRelay(cfg.contact_relay_url, timeout=cfg.contact_relay_timeout_seconds)
            logger.info("wiring.contact_relay kind=http")
        else:
            _CONTACT_RELAY = LoggingContactRelay()
            logger.info("wiring.contact_relay kind=logging")
    return _CONTACT_RELAY


def set_store(store: Optional[DocumentStoreProtocol]) -> None:
    """Allow tests to provide a document store (None re-enables lazy wiring)."""
    global _STORE
    _STORE = store


def set_recommendation_adapter(adapter: Optional[RecommendationAdapterProtocol]) -> None:
    global _RECOMMENDER
    _RECOMMENDER = adapter


def set_contact_relay(relay: Optional[ContactRelayProtocol]) -> None:
    global _CONTACT_RELAY
    _CONTACT_RELAY = relay


def reset() -> None:
    """Forget cached config and adapters (tests change env between cases)."""
    global _CONFIG, _STORE, _RECOMMENDER, _CONTACT_RELAY
    _CONFIG = None
    _STORE = None
    _RECOMMENDER = None
    _CONTACT_RELAY = None


# --- Service factories ----------------------------------------------------------


def comments_service() -> CommentsService:
    return CommentsService(get_store(), collection=get_config().comments_collection)


def faq_service() -> FaqService:
    return FaqService(get_store(), collection=get_config().faq_collection)


def category_service() -> CategoryService:
    return CategoryService(get_store(), collection=get_config().categories_collection)


def site_settings_service() -> SiteSettingsService:
    return SiteSettingsService(get_store(), collection=get_config().site_settings_collection)


def contact_service() -> ContactService:
    return ContactService(get_contact_relay())


def recommendation_service() -> RecommendationService:
    cfg = load_recommendation_config()
    return RecommendationService(get_recommendation_adapter(), max_results=cfg.max_results)
