"""
Configuration and startup security checks for the widget store.

Why: The storefront ships with development conveniences (in-memory document
store, stub recommender, unauthenticated admin panel, logging contact relay)
that must never reach a production deployment. This module reads the
environment once into an `AppConfig` and provides a single fail-fast guard.

Permissions: The caller needs no special privileges. The functions only read
environment variables; the guard raises `SystemExit` on fatal misconfiguration.
"""
from __future__ import annotations

from dataclasses import dataclass
import os

DEFAULT_STORE_ADAPTER = "widgetstore.store.memory"


@dataclass(frozen=True)
class AppConfig:
    environment: str
    enable_admin: bool
    store_adapter_path: str
    comments_collection: str
    faq_collection: str
    categories_collection: str
    site_settings_collection: str
    contact_relay_url: str
    contact_relay_timeout_seconds: int


def _is_prod_like(env: str) -> bool:
    env_l = (env or "").lower()
    return env_l in {"prod", "production", "stage", "staging"}


def _flag(name: str, default: str) -> bool:
    return (os.getenv(name, default) or "").strip().lower() in ("1", "true", "yes")


def _int_env(name: str, default: int, *, upper: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw!r}")
    if value <= 0 or value > upper:
        raise ValueError(f"{name} out of range (1..{upper}), got: {value}")
    return value


def load_app_config() -> AppConfig:
    """Read application settings from the environment.

    Defaults describe a local development setup: admin panel on, in-memory
    store, no contact relay URL (messages are only logged).
    """
    env = (os.getenv("WIDGETSTORE_ENV", "dev") or "dev").strip().lower()
    return AppConfig(
        environment=env,
        enable_admin=_flag("WIDGETSTORE_ENABLE_ADMIN", "false" if _is_prod_like(env) else "true"),
        store_adapter_path=(os.getenv("DOCUMENT_STORE_ADAPTER") or DEFAULT_STORE_ADAPTER).strip(),
        comments_collection=os.getenv("COMMENTS_COLLECTION_ID", "comments"),
        faq_collection=os.getenv("FAQ_COLLECTION_ID", "faqs"),
        categories_collection=os.getenv("CATEGORIES_COLLECTION_ID", "categories"),
        site_settings_collection=os.getenv("SITE_SETTINGS_COLLECTION_ID", "site_settings"),
        contact_relay_url=(os.getenv("CONTACT_RELAY_URL") or "").strip(),
        contact_relay_timeout_seconds=_int_env("CONTACT_RELAY_TIMEOUT", 10, upper=60),
    )


def ensure_secure_config_on_startup() -> None:
    """Fail fast on insecure production configuration.

    Checks (prod-like environments only):
    - The in-memory document store must not be used (data loss on restart).
    - The stub recommender must not be used.
    - A contact relay URL must be configured and use HTTPS.
    - The admin panel must be disabled; it has no authentication of its own
      and must be exposed through a protected deployment instead.
    """
    env = os.getenv("WIDGETSTORE_ENV", "dev")
    if not _is_prod_like(env):
        return  # dev/test remain permissive

    cfg = load_app_config()

    if cfg.store_adapter_path == DEFAULT_STORE_ADAPTER:
        raise SystemExit(
            "Refusing to start: DOCUMENT_STORE_ADAPTER points to the in-memory store in production."
        )

    adapter = (os.getenv("RECOMMENDATION_ADAPTER") or "").strip()
    backend = (os.getenv("RECOMMENDATION_BACKEND") or "stub").strip().lower()
    if not adapter and backend == "stub":
        raise SystemExit(
            "Refusing to start: RECOMMENDATION_BACKEND=stub is not allowed in production/staging. Configure a real adapter."
        )

    if not cfg.contact_relay_url:
        raise SystemExit("Refusing to start: CONTACT_RELAY_URL is unset in production.")
    if not cfg.contact_relay_url.lower().startswith("https://"):
        raise SystemExit("Refusing to start: CONTACT_RELAY_URL must use https in production.")

    if cfg.enable_admin:
        raise SystemExit(
            "Refusing to start: WIDGETSTORE_ENABLE_ADMIN must be false in production/staging."
        )
