"""
Deterministic recommendation adapter for local development and tests.

Behavior:
    Scores each widget by how many query words appear in its name,
    description, category or tags; words from the browsing history count
    half. Returns the best matches (ties keep catalogue order).
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from .ports import Recommendation

_WORD = re.compile(r"[a-z0-9]+")
MAX_RESULTS = 4


def _words(text: str) -> set[str]:
    return {w for w in _WORD.findall((text or "").lower()) if len(w) > 1}


class StubRecommendationAdapter:
    """Keyword overlap instead of a model call."""

    def recommend(
        self,
        *,
        search_query: str,
        user_history: Optional[str],
        widgets: Sequence[dict],
    ) -> List[Recommendation]:
        query_words = _words(search_query)
        history_words = _words(user_history or "") - query_words
        scored = []
        for position, widget in enumerate(widgets):
            haystack = _words(
                " ".join(
                    [
                        str(widget.get("name", "")),
                        str(widget.get("description", "")),
                        str(widget.get("category", "")),
                        " ".join(widget.get("tags") or []),
                    ]
                )
            )
            score = len(query_words & haystack) + 0.5 * len(history_words & haystack)
            if score > 0:
                scored.append((-score, position, widget))
        scored.sort(key=lambda item: (item[0], item[1]))
        return [
            Recommendation(name=str(w.get("name", "")), description=str(w.get("description", "")))
            for _, _, w in scored[:MAX_RESULTS]
        ]


def build() -> StubRecommendationAdapter:
    """Factory used by the web wiring to instantiate the adapter."""
    return StubRecommendationAdapter()
