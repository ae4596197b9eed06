"""
Recommendation service, stub adapter and adapter configuration.
"""
from __future__ import annotations

import pytest

from widgetstore.catalog import ALL_WIDGETS
from widgetstore.recommendations import (
    Recommendation,
    RecommendationService,
    RecommendationUnavailableError,
)
from widgetstore.recommendations.config import load_recommendation_config
from widgetstore.recommendations.stub import StubRecommendationAdapter, build


class _FixedAdapter:
    def __init__(self, results):
        self.results = results
        self.calls = []

    def recommend(self, *, search_query, user_history, widgets):
        self.calls.append((search_query, user_history, widgets))
        return self.results


class _FailingAdapter:
    def recommend(self, **kwargs):
        raise RuntimeError("model offline")


def test_stub_scores_keywords_and_limits_results():
    adapter = build()
    summaries = [w.summary() for w in ALL_WIDGETS]
    results = adapter.recommend(search_query="weather alerts", user_history=None, widgets=summaries)
    assert [r.name for r in results][:2] == ["AtmoSphere", "StormChaser"]
    assert len(results) <= 4


def test_stub_history_counts_half():
    adapter = StubRecommendationAdapter()
    summaries = [w.summary() for w in ALL_WIDGETS]
    results = adapter.recommend(search_query="music", user_history="meditation", widgets=summaries)
    names = [r.name for r in results]
    assert names[0] == "SoundWeave"
    assert "Zenith" in names


def test_stub_no_match_returns_empty():
    adapter = StubRecommendationAdapter()
    assert adapter.recommend(search_query="xylophone", user_history=None, widgets=[w.summary() for w in ALL_WIDGETS]) == []


def test_service_keeps_only_existing_widgets_and_fills_descriptions():
    adapter = _FixedAdapter(
        [
            Recommendation(name="zenith", description=""),
            Recommendation(name="Imaginary Widget", description="does not exist"),
            Recommendation(name="Zenith", description="duplicate"),
            Recommendation(name="Glimpse", description="Share photos."),
        ]
    )
    results = RecommendationService(adapter).recommend(search_query="calm", user_history="  ")
    assert [r.name for r in results] == ["Zenith", "Glimpse"]
    assert results[0].description == "Find your calm with guided meditations and mindfulness exercises."
    assert results[1].description == "Share photos."
    query, history, widgets = adapter.calls[0]
    assert query == "calm" and history is None
    assert len(widgets) == 12


def test_service_respects_max_results():
    adapter = _FixedAdapter([Recommendation(name=w.name, description="") for w in ALL_WIDGETS])
    assert len(RecommendationService(adapter, max_results=2).recommend(search_query="all")) == 2


@pytest.mark.parametrize("query", ["", "   ", "x" * 201])
def test_service_rejects_invalid_query(query):
    with pytest.raises(ValueError, match="invalid_search_query"):
        RecommendationService(_FixedAdapter([])).recommend(search_query=query)


def test_service_maps_adapter_failure():
    with pytest.raises(RecommendationUnavailableError):
        RecommendationService(_FailingAdapter()).recommend(search_query="music")


def test_service_accepts_lazy_adapter_results():
    results = iter([Recommendation(name="Zenith", description=""), Recommendation(name="Nope", description="x")])
    service = RecommendationService(_FixedAdapter(results))
    recs = service.recommend(search_query="calm")
    assert [r.name for r in recs] == ["Zenith"]


def test_service_maps_failing_lazy_results():
    def broken():
        yield Recommendation(name="Zenith", description="")
        raise RuntimeError("stream cut")

    service = RecommendationService(_FixedAdapter(broken()))
    with pytest.raises(RecommendationUnavailableError):
        service.recommend(search_query="calm")


def test_config_defaults_to_stub():
    cfg = load_recommendation_config()
    assert cfg.backend == "stub"
    assert cfg.adapter_path == "widgetstore.recommendations.stub"
    assert cfg.timeout_seconds == 20
    assert cfg.max_results == 4


def test_config_custom_adapter_path(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("RECOMMENDATION_ADAPTER", "acme.recommender")
    monkeypatch.setenv("RECOMMENDATION_TIMEOUT", "5")
    cfg = load_recommendation_config()
    assert cfg.backend == "custom"
    assert cfg.adapter_path == "acme.recommender"
    assert cfg.timeout_seconds == 5


def test_config_rejects_stub_in_prod(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WIDGETSTORE_ENV", "production")
    with pytest.raises(ValueError):
        load_recommendation_config()


@pytest.mark.parametrize("name,value", [("RECOMMENDATION_TIMEOUT", "0"), ("RECOMMENDATION_MAX_RESULTS", "99"), ("RECOMMENDATION_TIMEOUT", "abc")])
def test_config_validates_integers(monkeypatch: pytest.MonkeyPatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError, match=name):
        load_recommendation_config()


def test_config_unknown_backend(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("RECOMMENDATION_BACKEND", "openai")
    with pytest.raises(ValueError):
        load_recommendation_config()
