"""
Recommendation API.

Why:
    The adapter call is synchronous and may be slow (an external model). It
    runs in a worker thread with the configured timeout so one slow request
    does not block the event loop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from widgetstore.recommendations import RecommendationUnavailableError
from widgetstore.recommendations.config import load_recommendation_config

from .. import wiring
from ..responses import bad_request, json_private, private_error
from ..security import csrf_guard

recommendations_router = APIRouter(tags=["Recommendations"])
logger = logging.getLogger("widgetstore.web.recommendations")


class RecommendationRequest(BaseModel):
    searchQuery: str = ""
    userHistory: Optional[str] = Field(default=None, max_length=2000)


@recommendations_router.post("/api/recommendations")
async def recommend_api(request: Request, payload: RecommendationRequest):
    """
    Recommend catalogue widgets for a search query.

    Behavior:
        - 200 with `{"recommendations": [{"name", "description"}, ...]}`
        - 400 `invalid_search_query` for an empty query
        - 503 `recommendations_unavailable` when the adapter fails or times out
    """
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    try:
        cfg = load_recommendation_config()
        service = wiring.recommendation_service()
    except ValueError as exc:
        logger.error("recommendations.misconfigured reason=%s", exc)
        return private_error("service_unavailable", "recommendations_unavailable", status_code=503)

    try:
        results = await asyncio.wait_for(
            asyncio.to_thread(
                service.recommend,
                search_query=payload.searchQuery,
                user_history=payload.userHistory,
            ),
            timeout=cfg.timeout_seconds,
        )
    except ValueError as exc:
        return bad_request(str(exc))
    except asyncio.TimeoutError:
        logger.warning("recommendations.timeout seconds=%s", cfg.timeout_seconds)
        return private_error("service_unavailable", "recommendations_unavailable", status_code=503)
    except RecommendationUnavailableError:
        return private_error("service_unavailable", "recommendations_unavailable", status_code=503)
    logger.info("recommendations.served count=%s query_len=%s", len(results), len(payload.searchQuery))
    return json_private({"recommendations": [r.to_dict() for r in results]})
