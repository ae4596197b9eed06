"""
Recommendation configuration parsing and validation.

Intent:
    One place that reads the environment variables selecting the adapter
    (DI by module path), its timeout and how many widgets it may return.
"""
from __future__ import annotations

from dataclasses import dataclass
import os


@dataclass(frozen=True)
class RecommendationConfig:
    backend: str  # "stub" | "custom"
    adapter_path: str
    timeout_seconds: int
    max_results: int


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


def _is_prod_like() -> bool:
    env = (os.getenv("WIDGETSTORE_ENV") or "dev").lower()
    return env in {"prod", "production", "stage", "staging"}


def load_recommendation_config() -> RecommendationConfig:
    """
    Parse recommendation settings from the environment.

    Behavior:
        - `RECOMMENDATION_ADAPTER` (dotted module path exposing `build()`)
          takes precedence and marks the backend as "custom".
        - Otherwise `RECOMMENDATION_BACKEND` must be "stub" (default).
        - The stub is refused in production/staging.
    """
    adapter_path = (os.getenv("RECOMMENDATION_ADAPTER") or "").strip()
    if adapter_path:
        backend = "custom"
    else:
        backend = (os.getenv("RECOMMENDATION_BACKEND") or "stub").strip().lower()
        if backend != "stub":
            raise ValueError("RECOMMENDATION_BACKEND must be 'stub' unless RECOMMENDATION_ADAPTER is set")
        adapter_path = "widgetstore.recommendations.stub"
    if backend == "stub" and _is_prod_like():
        raise ValueError("RECOMMENDATION_BACKEND=stub is not allowed in production/staging environments.")

    return RecommendationConfig(
        backend=backend,
        adapter_path=adapter_path,
        timeout_seconds=_int_env("RECOMMENDATION_TIMEOUT", 20, upper=120),
        max_results=_int_env("RECOMMENDATION_MAX_RESULTS", 4, upper=12),
    )
