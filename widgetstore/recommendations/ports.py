"""
Ports for recommendation adapters: result types, protocol and errors.

Intent:
    The storefront asks an external generative model which widgets fit a
    shopper's search and browsing history. The call itself is opaque; only
    this contract is shared between the service and concrete adapters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence


@dataclass(frozen=True)
class Recommendation:
    """One recommended widget as returned by an adapter."""

    name: str
    description: str

    def to_dict(self) -> dict:
        return {"name": self.name, "description": self.description}


class RecommendationAdapterProtocol(Protocol):
    """Recommend widgets from the full catalogue summary."""

    def recommend(
        self,
        *,
        search_query: str,
        user_history: Optional[str],
        widgets: Sequence[dict],
    ) -> List[Recommendation]:
        ...


class RecommendationError(Exception):
    """Base class for recommendation adapter failures."""


class RecommendationUnavailableError(RecommendationError):
    """The adapter failed or timed out; the UI shows a soft error."""


__all__ = [
    "Recommendation",
    "RecommendationAdapterProtocol",
    "RecommendationError",
    "RecommendationUnavailableError",
]
