"""Recommendation use case: ask the adapter, keep only real catalogue widgets."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from widgetstore.catalog import ALL_WIDGETS, Widget

from .ports import Recommendation, RecommendationAdapterProtocol, RecommendationUnavailableError


logger = logging.getLogger("widgetstore.recommendations")

MAX_QUERY_LENGTH = 200
MAX_HISTORY_LENGTH = 2000


@dataclass
class RecommendationService:
    adapter: RecommendationAdapterProtocol
    widgets: Sequence[Widget] = ALL_WIDGETS
    max_results: int = 4

    def recommend(self, *, search_query: str, user_history: Optional[str] = None) -> List[Recommendation]:
        """Return adapter recommendations restricted to existing widgets.

        Behavior:
            - Unknown names are dropped, duplicates collapsed (case-insensitive).
            - Empty descriptions are filled from the catalogue.
            - Any adapter exception becomes RecommendationUnavailableError.
        """
        query = (search_query or "").strip()
        if not query or len(query) > MAX_QUERY_LENGTH:
            raise ValueError("invalid_search_query")
        history = (user_history or "").strip()[:MAX_HISTORY_LENGTH] or None

        try:
            # Adapters may return any iterable, including a lazy one.
            raw = list(
                self.adapter.recommend(
                    search_query=query,
                    user_history=history,
                    widgets=[w.summary() for w in self.widgets],
                )
                or []
            )
        except Exception as exc:
            logger.warning("recommendations.adapter_failed reason=%s", exc.__class__.__name__)
            raise RecommendationUnavailableError("adapter_failed") from exc

        by_name = {w.name.lower(): w for w in self.widgets}
        seen: set[str] = set()
        results: List[Recommendation] = []
        for rec in raw:
            key = (getattr(rec, "name", "") or "").strip().lower()
            widget = by_name.get(key)
            if widget is None or key in seen:
                continue
            seen.add(key)
            description = (getattr(rec, "description", "") or "").strip() or widget.description
            results.append(Recommendation(name=widget.name, description=description))
            if len(results) >= self.max_results:
                break
        dropped = len(raw) - len(results)
        if dropped:
            logger.info("recommendations.filtered dropped=%s kept=%s", dropped, len(results))
        return results
