"""Widget recommendations behind an adapter port."""

from .ports import (
    Recommendation,
    RecommendationAdapterProtocol,
    RecommendationError,
    RecommendationUnavailableError,
)
from .service import RecommendationService

__all__ = [
    "Recommendation",
    "RecommendationAdapterProtocol",
    "RecommendationError",
    "RecommendationUnavailableError",
    "RecommendationService",
]
