"""FAQ page and the public read APIs for FAQs, categories and site settings."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from .. import wiring
from ..components import FaqAccordion
from ..responses import json_public, layout_response, not_found

faq_router = APIRouter(tags=["FAQ"])


@faq_router.get("/faq", response_class=HTMLResponse)
async def faq_page(request: Request, q: str = ""):
    items = wiring.faq_service().list(q)
    content = (
        "<h1>Frequently Asked Questions</h1>"
        f"{FaqAccordion(items, query=q).render()}"
    )
    return layout_response(request, "FAQ", content)


@faq_router.get("/api/faqs")
async def list_faqs_api(q: str = ""):
    return json_public([item.to_dict() for item in wiring.faq_service().list(q)])


@faq_router.get("/api/categories")
async def list_categories_api():
    return json_public([c.to_dict() for c in wiring.category_service().list()])


@faq_router.get("/api/site-settings")
async def site_settings_api():
    settings = wiring.site_settings_service().get()
    if settings is None:
        return not_found("settings_not_found")
    return json_public(settings.to_dict())
